"""Conector Daraja - adapter de borda para a API M-Pesa.

Este módulo é o único ponto de IO para a Daraja.
Responsabilidades:
- HTTP client (token OAuth + envio de RequestDescriptor)
- Modelos e erros da API Daraja
- Parsing de callbacks do webhook
"""

from .daraja_errors import (
    DarajaApiError,
    DarajaCredentialsError,
    is_permanent_error,
    parse_daraja_error,
)
from .http_base import HttpClient, HttpClientConfig, HttpError
from .http_client import DarajaHttpClient, create_daraja_http_client

__all__ = [
    "DarajaApiError",
    "DarajaCredentialsError",
    "DarajaHttpClient",
    "HttpClient",
    "HttpClientConfig",
    "HttpError",
    "create_daraja_http_client",
    "is_permanent_error",
    "parse_daraja_error",
]
