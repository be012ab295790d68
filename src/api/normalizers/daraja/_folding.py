"""Dobra de arrays chave/valor e extração tolerante de campos Daraja.

Separado de extractor.py para centralizar a política de defaults:
nenhuma função aqui lança exceção; ausência sempre resolve para um
default documentado (string vazia, 0 ou relógio atual).
"""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING, Any

from app.domain.timestamps import format_vendor_timestamp, parse_vendor_timestamp
from config.logging import log_fallback

if TYPE_CHECKING:
    from datetime import datetime

logger = logging.getLogger(__name__)


def as_dict(value: Any) -> dict[str, Any]:
    """Retorna o valor se for objeto JSON, senão dict vazio."""
    return value if isinstance(value, dict) else {}


def dig(source: Any, *path: str) -> Any:
    """Desce por chaves aninhadas; qualquer nível ausente retorna None."""
    current = source
    for key in path:
        if not isinstance(current, dict):
            return None
        current = current.get(key)
    return current


def fold_pairs(items: Any, key_field: str) -> dict[str, Any]:
    """Dobra lista de pares {key_field, Value} em um dict.

    Chaves duplicadas mantêm o último valor. Entrada que não é lista,
    itens que não são objetos e itens sem chave textual são ignorados.

    Args:
        items: Lista bruta do callback (ex: CallbackMetadata.Item)
        key_field: Campo que contém a chave ("Name" ou "Key")

    Returns:
        Mapeamento chave → valor (vazio se nada aproveitável)
    """
    if not isinstance(items, list):
        return {}
    folded: dict[str, Any] = {}
    for item in items:
        if not isinstance(item, dict):
            continue
        key = item.get(key_field)
        if not isinstance(key, str) or not key:
            continue
        folded[key] = item.get("Value")
    return folded


def as_text(value: Any, default: str = "") -> str:
    """Converte valor em texto; None/vazio vira default."""
    if value is None or isinstance(value, (dict, list)):
        return default
    text = str(value).strip()
    return text or default


def first_text(*values: Any, default: str = "") -> str:
    """Primeiro valor textual não vazio na ordem de fallback."""
    for value in values:
        text = as_text(value)
        if text:
            return text
    return default


def optional_text(*values: Any) -> str | None:
    """Como first_text, mas ausência vira None (campo opcional omitido)."""
    return first_text(*values) or None


def as_amount(value: Any) -> float:
    """Converte valor monetário (número ou string numérica) em float; senão 0."""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        if isinstance(value, (int, float)):
            number = float(value)
        else:
            number = float(Decimal(str(value).strip()))
    except (InvalidOperation, ValueError, OverflowError):
        return 0.0
    if number != number or number in (float("inf"), float("-inf")):
        return 0.0
    return number


def first_amount(*values: Any) -> float:
    """Primeiro valor monetário não nulo na ordem de fallback; senão 0."""
    for value in values:
        amount = as_amount(value)
        if amount:
            return amount
    return 0.0


def as_result_code(value: Any) -> int:
    """Converte ResultCode (int ou string numérica) em int; senão 0."""
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else 0
    try:
        return int(str(value).strip())
    except ValueError:
        return 0


def resolve_timestamp(value: Any, now: datetime | None, component: str) -> str:
    """Formata timestamp do fornecedor, registrando quando o fallback é usado.

    Valor ausente é o caso normal de vários callbacks e não gera log;
    valor presente porém malformado gera log de fallback.
    """
    if value not in (None, "") and parse_vendor_timestamp(value) is None:
        log_fallback(
            logger,
            component,
            reason="malformed_vendor_timestamp",
            value_type=type(value).__name__,
        )
    return format_vendor_timestamp(value, now)
