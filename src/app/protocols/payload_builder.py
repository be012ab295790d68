"""Contrato dos builders de corpo outbound."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from collections.abc import Mapping


class BodyBuilder(Protocol):
    """Função pura que monta o corpo JSON de uma operação."""

    def __call__(self, params: Mapping[str, Any], timestamp: str) -> dict[str, Any]: ...
