"""Logging estruturado JSON do daraja_bridge.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="daraja_bridge")
    logger = get_logger(__name__)

Todo log carrega correlation_id, service, level, logger, message e
asctime. Telefones, passkeys e credenciais nunca saem em claro.
"""

from config.logging.config import configure_logging, get_logger, log_fallback
from config.logging.filters import (
    REDACTED_VALUE,
    SENSITIVE_LOG_FIELDS,
    CorrelationIdFilter,
    SensitiveFieldFilter,
)
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    LOG_FIELD_ORDER,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "LOG_FIELD_ORDER",
    "REDACTED_VALUE",
    "REQUIRED_LOG_FIELDS",
    "SENSITIVE_LOG_FIELDS",
    "CorrelationIdFilter",
    "SensitiveFieldFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "log_fallback",
]
