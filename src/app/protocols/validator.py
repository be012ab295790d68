"""Erros de validação de parâmetros outbound."""

from __future__ import annotations


class ValidationError(Exception):
    """Erro de validação de parâmetros (erro de configuração, não retentável)."""
