"""Erros de validação de operações Daraja.

Todos são erros de configuração: reportados ao chamador, nunca retentados.
"""

from __future__ import annotations

from app.protocols.validator import ValidationError


class UnsupportedOperationError(ValidationError):
    """Par (resource, operation) fora do catálogo."""

    def __init__(self, resource: str, operation: str) -> None:
        super().__init__(f"Unsupported operation: {resource}/{operation}")
        self.resource = resource
        self.operation = operation


class MissingParameterError(ValidationError):
    """Parâmetro obrigatório ausente ou vazio."""

    def __init__(self, missing: list[str]) -> None:
        super().__init__(f"Missing required parameter(s): {', '.join(missing)}")
        self.missing = missing


class InvalidParameterError(ValidationError):
    """Parâmetro presente mas com valor que não gera um corpo válido."""

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"Invalid parameter '{name}': {reason}")
        self.name = name
        self.reason = reason
