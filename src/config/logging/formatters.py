"""Formatter JSON dos logs do daraja_bridge.

Todo record sai como um objeto JSON por linha, com os campos base na
ordem de LOG_FIELD_ORDER seguidos dos campos passados via `extra`.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Ordem dos campos base no JSON emitido
LOG_FIELD_ORDER: tuple[str, ...] = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

REQUIRED_LOG_FIELDS = frozenset(LOG_FIELD_ORDER)

# Nomes publicados para atributos do LogRecord
FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria o JsonFormatter usado pelo handler raiz.

    Exemplo de output:
        {"asctime": "2026-02-02 10:30:00,123", "level": "INFO",
         "logger": "app.use_cases.daraja.process_callback",
         "message": "daraja_callback_processed", "correlation_id": "abc-123",
         "service": "daraja_bridge", "event_kind": "stkpush.completed"}
    """
    return JsonFormatter(
        " ".join(f"%({field})s" for field in LOG_FIELD_ORDER),
        rename_fields=FIELD_RENAME_MAP,
        json_ensure_ascii=False,
    )
