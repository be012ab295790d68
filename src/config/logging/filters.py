"""Filters do handler raiz: contexto da requisição e máscara de PII.

Filters só enriquecem ou mascaram o record; nenhum descarta logs.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record.

    correlation_id passado explicitamente via `extra` tem precedência
    sobre o valor do contexto.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "correlation_id", None):
            record.correlation_id = self._get_correlation_id()
        record.service = self._service_name
        return True


# Campos de `extra` que nunca podem sair em claro
SENSITIVE_LOG_FIELDS = frozenset(
    {
        "phone_number",
        "msisdn",
        "passkey",
        "password",
        "security_credential",
        "initiator_password",
        "consumer_key",
        "consumer_secret",
        "access_token",
    }
)

REDACTED_VALUE = "[REDACTED]"


class SensitiveFieldFilter(logging.Filter):
    """Mascara campos sensíveis passados via `extra`.

    Rede de segurança para chamadores que anexam credenciais ou telefones
    ao log por engano; o valor é substituído, o record segue adiante.
    """

    def __init__(self, fields: frozenset[str] = SENSITIVE_LOG_FIELDS) -> None:
        super().__init__()
        self._fields = fields

    def filter(self, record: logging.LogRecord) -> bool:
        for field in self._fields:
            if getattr(record, field, None) is not None:
                setattr(record, field, REDACTED_VALUE)
        return True
