"""Sink padrão: publica eventos emitidos como log estruturado.

Registra apenas metadados do evento. Telefone e payload bruto ficam
fora do log.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.constants.daraja import EventKind

logger = logging.getLogger(__name__)

_LOGGED_FIELDS = ("transactionId", "transactionType", "amount", "status", "resultCode")


class LoggingCallbackSink:
    """Implementação de CallbackSinkProtocol baseada em logging."""

    def __init__(self, target: logging.Logger | None = None) -> None:
        self._logger = target or logger

    async def publish(self, event_kind: EventKind, data: Any) -> None:
        extra: dict[str, Any] = {"event_kind": str(event_kind)}
        if isinstance(data, dict):
            extra.update({key: data[key] for key in _LOGGED_FIELDS if key in data})
        self._logger.info("daraja_event_emitted", extra=extra)
