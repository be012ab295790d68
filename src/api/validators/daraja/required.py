"""Validação de presença de parâmetros obrigatórios."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.validators.daraja.errors import MissingParameterError

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def find_missing_params(required: Sequence[str], params: Mapping[str, Any]) -> list[str]:
    """Retorna, na ordem declarada, os obrigatórios ausentes ou vazios."""
    return [name for name in required if _is_blank(params.get(name))]


def validate_required_params(required: Sequence[str], params: Mapping[str, Any]) -> None:
    """Valida presença de todos os parâmetros obrigatórios.

    Zero numérico conta como presente (ex: offsetValue=0).

    Raises:
        MissingParameterError: Se algum obrigatório estiver ausente
    """
    missing = find_missing_params(required, params)
    if missing:
        raise MissingParameterError(missing)
