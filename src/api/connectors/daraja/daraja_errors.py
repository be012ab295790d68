"""Erros e helpers de parsing para a API Daraja."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# Prefixos de errorCode da Daraja que não adianta retentar
_PERMANENT_PREFIXES = ("400.", "401.", "403.", "404.")
_INVALID_TOKEN_CODES = frozenset({"404.001.03", "401.003.01"})


class DarajaCredentialsError(Exception):
    """Consumer key/secret ausentes: erro de configuração, nunca retentado."""


@dataclass(frozen=True)
class DarajaApiError:
    """Erro retornado pela API Daraja."""

    error_code: str
    error_message: str
    request_id: str
    is_permanent: bool  # True se erro não é retentável

    @property
    def is_invalid_token(self) -> bool:
        return self.error_code in _INVALID_TOKEN_CODES


def is_permanent_error(error_code: str) -> bool:
    """Classifica erro como permanente ou transitório.

    errorCode tem o formato "<status>.<grupo>.<código>" (ex: 400.002.02).
    Erros 4xx são permanentes; 5xx e desconhecidos são transitórios.
    """
    return error_code.startswith(_PERMANENT_PREFIXES)


def parse_daraja_error(response_data: Any) -> DarajaApiError | None:
    """Extrai informações de erro do response da Daraja.

    Args:
        response_data: JSON do response

    Returns:
        DarajaApiError se houver erro, None se sucesso
    """
    if not isinstance(response_data, dict):
        return None
    error_code = response_data.get("errorCode")
    if not error_code:
        return None

    code = str(error_code)
    return DarajaApiError(
        error_code=code,
        error_message=str(response_data.get("errorMessage") or "Erro desconhecido"),
        request_id=str(response_data.get("requestId") or ""),
        is_permanent=is_permanent_error(code),
    )
