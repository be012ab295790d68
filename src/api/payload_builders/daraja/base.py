"""Helpers comuns aos builders de corpo Daraja."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping


def text_param(params: Mapping[str, Any], name: str) -> str:
    """Lê parâmetro textual obrigatório, sem espaços nas bordas."""
    return str(params[name]).strip()


def optional_text_param(params: Mapping[str, Any], name: str, default: str = "") -> str:
    """Lê parâmetro textual opcional; ausente/None vira default."""
    value = params.get(name)
    if value is None:
        return default
    text = str(value).strip()
    return text or default
