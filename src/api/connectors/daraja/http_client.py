"""Cliente HTTP especializado para a API Daraja (M-Pesa).

Estende HttpClient genérico com comportamentos específicos da Daraja:
- Token OAuth (client_credentials via Basic auth) com cache até expirar
- Envio de RequestDescriptor com Bearer token
- Tratamento de erros Daraja (errorCode, errorMessage)
- Logging estruturado sem credenciais nem telefones
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from api.connectors.daraja.daraja_errors import (
    DarajaApiError,
    DarajaCredentialsError,
    parse_daraja_error,
)
from api.connectors.daraja.daraja_logging import log_daraja_error, log_success
from api.connectors.daraja.http_base import HttpClient, HttpClientConfig, HttpError

if TYPE_CHECKING:
    from collections.abc import Callable

    import httpx

    from app.protocols.models import RequestDescriptor
    from config.settings import DarajaSettings

logger: logging.Logger = logging.getLogger(__name__)

OAUTH_TOKEN_PATH = "/oauth/v1/generate"
DEFAULT_TOKEN_TTL_SECONDS = 3599


class DarajaHttpClient(HttpClient):
    """Cliente HTTP especializado para a Daraja.

    Tratamento específico:
    - Token OAuth cacheado e renovado antes de expirar
    - Token inválido (401/404.001.03): descarta cache e falha sem retry
    - Erros Daraja: classifica permanente vs transitório
    - Logging: sem tokens, credenciais ou números
    """

    def __init__(
        self,
        base_url: str,
        consumer_key: str,
        consumer_secret: str,
        config: HttpClientConfig | None = None,
        token_expiry_margin_seconds: int = 60,
        transport: httpx.AsyncBaseTransport | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        super().__init__(config, transport)
        self._base_url = base_url.rstrip("/")
        self._consumer_key = consumer_key
        self._consumer_secret = consumer_secret
        self._token_expiry_margin = token_expiry_margin_seconds
        self._clock = clock
        self._access_token: str | None = None
        self._token_expires_at = 0.0

    async def send(self, descriptor: RequestDescriptor) -> dict[str, Any]:
        """Envia uma requisição codificada para a Daraja.

        Args:
            descriptor: Método, path e corpo produzidos pelo encoder

        Returns:
            Response JSON da Daraja

        Raises:
            DarajaCredentialsError: Se credenciais não configuradas
            HttpError: Se erro HTTP ou Daraja
        """
        access_token = await self.get_access_token()
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {access_token}",
        }
        response = await self.request(
            descriptor.method,
            f"{self._base_url}{descriptor.path}",
            json=descriptor.body,
            headers=headers,
            idempotent=False,
        )
        return self._process_response(response, descriptor.method, descriptor.path)

    async def get_access_token(self) -> str:
        """Retorna token OAuth válido, buscando um novo se necessário."""
        if self._access_token and self._clock() < self._token_expires_at:
            return self._access_token

        if not self._consumer_key or not self._consumer_secret:
            logger.error("daraja_credentials_missing", extra={"base_url": self._base_url})
            raise DarajaCredentialsError(
                "consumer_key e consumer_secret são obrigatórios. "
                "Verifique MPESA_CONSUMER_KEY e MPESA_CONSUMER_SECRET."
            )

        response = await self.get(
            f"{self._base_url}{OAUTH_TOKEN_PATH}",
            params={"grant_type": "client_credentials"},
            auth=(self._consumer_key, self._consumer_secret),
        )
        data = self._process_response(response, "GET", OAUTH_TOKEN_PATH)
        token = data.get("access_token")
        if not token:
            raise HttpError("daraja_token_missing", status_code=response.status_code)

        try:
            ttl = int(data.get("expires_in", DEFAULT_TOKEN_TTL_SECONDS))
        except (TypeError, ValueError):
            ttl = DEFAULT_TOKEN_TTL_SECONDS
        self._access_token = str(token)
        self._token_expires_at = self._clock() + max(ttl - self._token_expiry_margin, 0)
        logger.info("daraja_token_refreshed", extra={"expires_in": ttl})
        return self._access_token

    def invalidate_token(self) -> None:
        self._access_token = None
        self._token_expires_at = 0.0

    def _process_response(
        self,
        response: httpx.Response,
        method: str,
        path: str,
    ) -> dict[str, Any]:
        """Processa response da Daraja."""
        try:
            response_data = response.json()
        except ValueError as e:
            logger.error("daraja_response_invalid_json", extra={"path": path})
            raise HttpError("Response JSON inválido", status_code=response.status_code) from e

        daraja_error = parse_daraja_error(response_data)
        if daraja_error:
            self._handle_daraja_error(daraja_error, method, path, response.status_code)

        if response.status_code >= 400:
            raise HttpError(
                "daraja_http_error",
                status_code=response.status_code,
                is_retryable=False,
            )

        if not isinstance(response_data, dict):
            raise HttpError("Response JSON não é objeto", status_code=response.status_code)

        log_success(method, path, response.status_code)
        return response_data

    def _handle_daraja_error(
        self,
        daraja_error: DarajaApiError,
        method: str,
        path: str,
        status_code: int,
    ) -> None:
        log_daraja_error(daraja_error, method, path)
        if daraja_error.is_invalid_token or status_code == 401:
            self.invalidate_token()

        raise HttpError(
            f"Daraja API error: {daraja_error.error_code} ({daraja_error.error_message})",
            status_code=status_code,
            is_retryable=not daraja_error.is_permanent,
        )


def create_daraja_http_client(
    settings: DarajaSettings | None = None,
) -> DarajaHttpClient:
    """Factory para criar cliente Daraja com config padrão.

    Args:
        settings: DarajaSettings opcional. Se None, carrega do ambiente.

    Returns:
        Cliente HTTP configurado para a Daraja.
    """
    # Import local para evitar dependência circular
    from config.settings import get_daraja_settings

    daraja = settings or get_daraja_settings()
    config = HttpClientConfig(
        timeout_seconds=daraja.request_timeout_seconds,
        max_retries=daraja.max_retries,
    )
    return DarajaHttpClient(
        base_url=daraja.base_url,
        consumer_key=daraja.consumer_key,
        consumer_secret=daraja.consumer_secret,
        config=config,
        token_expiry_margin_seconds=daraja.token_expiry_margin_seconds,
    )
