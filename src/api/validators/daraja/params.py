"""Validação e coerção de valores de parâmetros Daraja."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING, Any

from api.validators.daraja.errors import InvalidParameterError
from app.constants.daraja import IdentifierType

if TYPE_CHECKING:
    from collections.abc import Collection

PULL_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_decimal(name: str, value: Any) -> str:
    """Serializa valor numérico como string decimal (formato do fornecedor).

    Inteiros saem sem casas decimais ("100"), frações sem zeros à direita
    ("1.5").

    Raises:
        InvalidParameterError: Se o valor não for numérico finito
    """
    if isinstance(value, bool):
        raise InvalidParameterError(name, "expected a number")
    try:
        number = Decimal(str(value).strip())
    except InvalidOperation as exc:
        raise InvalidParameterError(name, "expected a number") from exc
    if not number.is_finite():
        raise InvalidParameterError(name, "expected a finite number")
    if number == number.to_integral_value():
        return str(int(number))
    return format(number.normalize(), "f")


def validate_choice(name: str, value: Any, allowed: Collection[str]) -> str:
    """Garante que o valor pertence ao conjunto de opções do fornecedor."""
    text = str(value).strip()
    if text not in allowed:
        options = ", ".join(sorted(allowed))
        raise InvalidParameterError(name, f"must be one of: {options}")
    return text


def validate_identifier_type(
    name: str,
    value: Any,
    allowed: Collection[IdentifierType] = (IdentifierType.SHORTCODE,),
) -> int:
    """Valida tipo de identificador (apenas shortcode=4 por padrão)."""
    try:
        code = int(str(value).strip())
    except ValueError as exc:
        raise InvalidParameterError(name, "expected an identifier type code") from exc
    if code not in {int(item) for item in allowed}:
        codes = ", ".join(str(int(item)) for item in allowed)
        raise InvalidParameterError(name, f"must be one of: {codes}")
    return code


def format_pull_date(name: str, value: Any) -> str:
    """Formata data da Pull API ("YYYY-MM-DD HH:MM:SS").

    datetime é formatado; strings passam sem alteração além do strip.
    """
    if isinstance(value, datetime):
        return value.strftime(PULL_DATE_FORMAT)
    text = str(value).strip()
    if not text:
        raise InvalidParameterError(name, "expected a date")
    return text
