"""Encoder de requisições Daraja.

Ponto único de construção outbound: catálogo → validação de
obrigatórios → builder → RequestDescriptor.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from api.payload_builders.daraja.catalog import get_operation_spec
from api.validators.daraja.required import validate_required_params
from app.domain.timestamps import vendor_timestamp
from app.protocols.models import RequestDescriptor

if TYPE_CHECKING:
    from collections.abc import Mapping
    from datetime import datetime

    from app.constants.daraja import Operation, Resource

logger = logging.getLogger(__name__)


def encode(
    resource: Resource | str,
    operation: Operation | str,
    params: Mapping[str, Any],
    now: datetime | None = None,
) -> RequestDescriptor:
    """Codifica uma operação no descriptor que o transporte envia.

    Determinístico para um relógio fixo: o mesmo `now` gera o mesmo
    Timestamp e a mesma Password.

    Args:
        resource: Recurso Daraja (ex: "stkPush")
        operation: Operação do recurso (ex: "initiate")
        params: Parâmetros nomeados da operação
        now: Relógio injetável; None usa o horário atual

    Returns:
        RequestDescriptor com método, path e corpo JSON

    Raises:
        UnsupportedOperationError: Se o par não estiver no catálogo
        MissingParameterError: Se faltar parâmetro obrigatório
        InvalidParameterError: Se um valor não gerar corpo válido
    """
    spec = get_operation_spec(resource, operation)
    validate_required_params(spec.required, params)
    body = spec.build(params, vendor_timestamp(now))

    logger.debug(
        "daraja_request_encoded",
        extra={
            "resource": spec.resource.value,
            "operation": spec.operation.value,
            "path": spec.path,
        },
    )
    return RequestDescriptor(path=spec.path, body=body)
