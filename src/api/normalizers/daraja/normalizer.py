"""Normalizer Daraja: despacho por tipo de evento configurado.

O tipo de evento vem da configuração do listener (path do webhook),
nunca do formato do payload: vários formatos planos não se distinguem
entre si sem esse contexto externo.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from api.normalizers.daraja.extractor import (
    decode_b2b_result,
    decode_b2c_result,
    decode_balance_result,
    decode_c2b_confirmation,
    decode_reversal_result,
    decode_stk_push,
    decode_transaction_status_result,
)
from app.constants.daraja import EventKind

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping
    from datetime import datetime

    from app.protocols.models import NormalizedPayment

    Decoder = Callable[[Any, datetime | None], NormalizedPayment]

logger = logging.getLogger(__name__)

_DECODERS: Mapping[EventKind, Decoder] = MappingProxyType(
    {
        EventKind.PAYMENT_RECEIVED: decode_c2b_confirmation,
        EventKind.STK_PUSH_COMPLETED: decode_stk_push,
        EventKind.B2C_COMPLETED: decode_b2c_result,
        EventKind.B2B_COMPLETED: decode_b2b_result,
        EventKind.REVERSAL_COMPLETED: decode_reversal_result,
        EventKind.BALANCE_COMPLETED: decode_balance_result,
        EventKind.TRANSACTION_STATUS_COMPLETED: decode_transaction_status_result,
    }
)

if set(_DECODERS) != set(EventKind):
    raise RuntimeError("Every EventKind must have a decoder")


def get_decoder(event_kind: EventKind | str) -> Decoder:
    """Retorna o decoder do tipo de evento.

    Raises:
        ValueError: Se o tipo de evento não existir (erro de configuração)
    """
    return _DECODERS[EventKind(event_kind)]


def normalize(
    event_kind: EventKind | str,
    envelope: Any,
    now: datetime | None = None,
) -> NormalizedPayment:
    """Normaliza um callback Daraja no registro canônico.

    Nunca falha por causa do conteúdo do envelope: estruturas ausentes ou
    malformadas resolvem para defaults.

    Args:
        event_kind: Tipo de evento configurado no listener
        envelope: JSON bruto do callback (preservado em raw_payload)
        now: Relógio injetável para fallback de timestamp

    Returns:
        NormalizedPayment completo

    Raises:
        ValueError: Se event_kind não for um EventKind conhecido
    """
    decoder = get_decoder(event_kind)
    record = decoder(envelope, now)
    logger.debug(
        "daraja_callback_normalized",
        extra={
            "event_kind": EventKind(event_kind).value,
            "transaction_type": record.transaction_type.value,
            "status": record.status.value,
            "result_code": record.result_code,
        },
    )
    return record
