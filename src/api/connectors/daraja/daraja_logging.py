"""Helpers de logging para a API Daraja (sem PII)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .daraja_errors import DarajaApiError

logger = logging.getLogger(__name__)


def log_daraja_error(
    daraja_error: DarajaApiError,
    method: str,
    path: str,
) -> None:
    """Loga erro da Daraja sem expor credenciais ou telefones."""
    logger.warning(
        "daraja_api_error",
        extra={
            "method": method,
            "path": path,
            "error_code": daraja_error.error_code,
            "request_id": daraja_error.request_id,
            "is_permanent": daraja_error.is_permanent,
        },
    )


def log_success(
    method: str,
    path: str,
    status_code: int,
) -> None:
    logger.debug(
        "daraja_request_succeeded",
        extra={
            "method": method,
            "path": path,
            "status_code": status_code,
        },
    )
