"""Protocolos HTTP usados pelo app.

Evita dependência direta da camada api.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from .models import RequestDescriptor


class DarajaHttpClientProtocol(Protocol):
    """Contrato mínimo para o transporte que envia requisições Daraja."""

    async def send(self, descriptor: RequestDescriptor) -> dict[str, Any]: ...
