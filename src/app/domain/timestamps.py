"""Codec de timestamps no formato Daraja (YYYYMMDDHHmmss, horário EAT).

A Daraja trabalha com horário civil do Quênia (UTC+3, sem horário de
verão). Toda conversão passa por aqui para manter uma única política de
fuso tanto no outbound (senha/Timestamp) quanto no inbound (TransTime).
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

EAT = timezone(timedelta(hours=3), "EAT")

VENDOR_TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"
VENDOR_TIMESTAMP_LENGTH = 14


def utcnow() -> datetime:
    """Relógio padrão (UTC, timezone-aware)."""
    return datetime.now(UTC)


def _as_aware(instant: datetime) -> datetime:
    # datetime naive é tratado como UTC
    if instant.tzinfo is None:
        return instant.replace(tzinfo=UTC)
    return instant


def vendor_timestamp(now: datetime | None = None) -> str:
    """Formata o instante em horário EAT no formato de 14 dígitos.

    Independe do fuso do host: o instante é convertido para UTC+3 antes
    da formatação.

    Args:
        now: Instante a formatar. Se None, usa o relógio atual.

    Returns:
        String de 14 dígitos (ex: "20231005143000").
    """
    instant = _as_aware(now if now is not None else utcnow())
    return instant.astimezone(EAT).strftime(VENDOR_TIMESTAMP_FORMAT)


def parse_vendor_timestamp(value: object) -> datetime | None:
    """Converte timestamp Daraja em datetime com offset +03:00.

    Aceita str ou int (a Daraja envia ambos, dependendo do callback).

    Returns:
        datetime em EAT ou None se ausente/malformado.
    """
    if value is None or isinstance(value, bool):
        return None
    text = str(value).strip()
    if len(text) != VENDOR_TIMESTAMP_LENGTH or not text.isdigit():
        return None
    try:
        parsed = datetime.strptime(text, VENDOR_TIMESTAMP_FORMAT)
    except ValueError:
        return None
    return parsed.replace(tzinfo=EAT)


def format_vendor_timestamp(value: object, now: datetime | None = None) -> str:
    """Converte timestamp Daraja em ISO-8601 com offset explícito.

    Valor ausente ou inválido cai para o relógio atual: o callback nunca
    é descartado por causa de um timestamp ruim.

    Args:
        value: Timestamp de 14 dígitos recebido do fornecedor.
        now: Relógio injetável para o fallback.

    Returns:
        ISO-8601 (ex: "2023-10-05T14:30:00+03:00").
    """
    parsed = parse_vendor_timestamp(value)
    if parsed is not None:
        return parsed.isoformat()
    return _as_aware(now if now is not None else utcnow()).isoformat()
