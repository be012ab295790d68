"""Use case de processamento de callback Daraja.

Dois canais independentes por callback:
- acknowledgement: resposta de transporte, sempre produzida
- emission: evento de domínio, sujeito à política do listener
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from api.normalizers.daraja import normalize
from app.protocols.models import (
    CallbackAcknowledgement,
    CallbackEmission,
    CallbackPolicy,
    CallbackResult,
)

if TYPE_CHECKING:
    from datetime import datetime

    from app.constants.daraja import EventKind
    from app.protocols.models import NormalizedPayment

logger = logging.getLogger(__name__)


def acknowledge() -> CallbackAcknowledgement:
    """Reconhecimento fixo exigido pela Daraja ({ResultCode: 0, ResultDesc: Accepted}).

    Independe do resultado de negócio: callback não reconhecido é
    reenviado pelo fornecedor.
    """
    return CallbackAcknowledgement()


def filter_record(
    record: NormalizedPayment,
    envelope: Any,
    policy: CallbackPolicy,
) -> CallbackEmission:
    """Decide emissão ou supressão do registro conforme a política.

    Args:
        record: Registro normalizado
        envelope: Payload bruto (emitido quando normalize_output=False)
        policy: Política do listener

    Returns:
        CallbackEmission (emitted=False quando suprimido)
    """
    if policy.success_only and not record.is_success:
        return CallbackEmission(emitted=False, record=record)

    data = record.to_payload() if policy.normalize_output else envelope
    return CallbackEmission(emitted=True, data=data, record=record)


def process_callback(
    event_kind: EventKind | str,
    envelope: Any,
    policy: CallbackPolicy | None = None,
    now: datetime | None = None,
) -> CallbackResult:
    """Normaliza, filtra e reconhece um callback.

    Args:
        event_kind: Tipo de evento configurado no listener
        envelope: JSON bruto do callback
        policy: Política de emissão (default: success_only + normalize_output)
        now: Relógio injetável

    Returns:
        CallbackResult com acknowledgement e emission separados
    """
    active_policy = policy or CallbackPolicy()
    record = normalize(event_kind, envelope, now)
    emission = filter_record(record, envelope, active_policy)

    logger.info(
        "daraja_callback_processed",
        extra={
            "event_kind": str(event_kind),
            "transaction_type": record.transaction_type.value,
            "status": record.status.value,
            "result_code": record.result_code,
            "emitted": emission.emitted,
        },
    )
    return CallbackResult(acknowledgement=acknowledge(), emission=emission)
