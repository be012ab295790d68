"""Configuração centralizada de logging.

Um único handler no logger raiz, com formatter JSON, injeção de
correlation_id/service e máscara de campos sensíveis.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização do serviço (app/bootstrap/)
    configure_logging(level="INFO", service_name="daraja_bridge")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("daraja_callback_received", extra={"event_kind": "b2c.completed"})
"""

from __future__ import annotations

import logging
from typing import IO, TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter, SensitiveFieldFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "daraja_bridge"

# Bibliotecas que logam URL e headers de cada requisição em INFO
NOISY_LOGGERS = ("httpx", "httpcore")


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
    stream: IO[str] | None = None,
) -> None:
    """Configura logging JSON estruturado para o serviço.

    Deve ser chamada uma vez na inicialização (app/bootstrap/). Chamadas
    seguintes substituem o handler anterior em vez de duplicá-lo.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço publicado em todo log.
        correlation_id_getter: Função que retorna o correlation_id do
            contexto atual (ex: app.observability.get_correlation_id).
        stream: Destino do handler (default: stderr).

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler(stream)
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))
    handler.addFilter(SensitiveFieldFilter())

    root = logging.getLogger()
    root.setLevel(level_upper)
    root.handlers = [handler]

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Retorna logger do módulo; service e correlation_id vêm do handler."""
    return logging.getLogger(name)


def log_fallback(
    logger: logging.Logger,
    component: str,
    reason: str | None = None,
    value_type: str | None = None,
) -> None:
    """Registra que um default substituiu dado ausente ou malformado.

    Nunca recebe o valor original, apenas o tipo dele.

    Args:
        logger: Logger do módulo chamador.
        component: Componente que aplicou o fallback (ex: "stkpush_timestamp").
        reason: Razão do fallback (ex: "malformed_vendor_timestamp").
        value_type: Tipo Python do valor recebido.
    """
    extra: dict[str, object] = {
        "fallback_used": True,
        "component": component,
    }
    if reason:
        extra["reason"] = reason
    if value_type:
        extra["value_type"] = value_type

    logger.info("Fallback applied for %s", component, extra=extra)
