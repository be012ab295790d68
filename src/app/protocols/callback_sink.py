"""Protocolos de destino dos eventos emitidos por callbacks."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.constants.daraja import EventKind


class CallbackSinkProtocol(Protocol):
    """Recebe os dados emitidos após o filtro de sucesso."""

    async def publish(self, event_kind: EventKind, data: Any) -> None:
        """data: registro normalizado (camelCase) ou o envelope bruto do callback."""
        ...
