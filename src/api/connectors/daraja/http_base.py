"""Transporte HTTP com retry para chamadas à Daraja."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

logger = logging.getLogger(__name__)

RETRYABLE_STATUS_CODES = frozenset({429, 500, 502, 503, 504})

# Falhas em que a requisição não chegou ao servidor: seguras para qualquer método
UNSENT_REQUEST_ERRORS = (httpx.ConnectError, httpx.ConnectTimeout, httpx.PoolTimeout)


@dataclass
class HttpClientConfig:
    """Timeout, retry e headers fixos do transporte."""

    timeout_seconds: float = 30.0
    max_retries: int = 3
    backoff_base_seconds: float = 2.0
    backoff_max_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True

    def backoff_for(self, attempt: int) -> float:
        """Espera exponencial da tentativa (limitada por backoff_max_seconds)."""
        return min(self.backoff_base_seconds * (2**attempt), self.backoff_max_seconds)


class HttpError(Exception):
    """Falha de transporte ou status HTTP (mensagem nunca carrega credenciais)."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        is_retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.is_retryable = is_retryable


def _is_retryable_status(status_code: int) -> bool:
    return status_code in RETRYABLE_STATUS_CODES or status_code >= 500


class HttpClient:
    """Executa requisições JSON com retry.

    Requisições idempotentes repetem 429, 5xx, timeout e falha de conexão.
    Não idempotentes (pagamentos) repetem só 429 e falhas antes do envio:
    após timeout de leitura ou 5xx a Daraja pode já ter processado a ordem.

    Um transport httpx pode ser injetado (ex.: httpx.MockTransport em testes).
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._transport = transport

    async def post(
        self,
        url: str,
        json: dict[str, Any],
        headers: dict[str, str] | None = None,
        idempotent: bool = False,
    ) -> httpx.Response:
        return await self.request(
            "POST", url, json=json, headers=headers, idempotent=idempotent
        )

    async def get(
        self,
        url: str,
        params: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
        auth: tuple[str, str] | None = None,
    ) -> httpx.Response:
        return await self.request("GET", url, params=params, headers=headers, auth=auth)

    async def request(
        self,
        method: str,
        url: str,
        *,
        json: dict[str, Any] | None = None,
        params: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
        auth: tuple[str, str] | None = None,
        idempotent: bool = True,
    ) -> httpx.Response:
        config = self._config
        request_kwargs: dict[str, Any] = {
            "json": json,
            "params": params,
            "headers": {**config.default_headers, **(headers or {})},
            "auth": auth,
            "timeout": config.timeout_seconds,
        }
        attempt = 0
        while True:
            try:
                return await self._send_once(method, url, request_kwargs)
            except HttpError as exc:
                if exc.is_retryable and not (idempotent or exc.status_code == 429):
                    raise HttpError(str(exc), status_code=exc.status_code) from exc
                if not exc.is_retryable or attempt >= config.max_retries:
                    raise
                reason = f"status_{exc.status_code}"
            except (httpx.TimeoutException, httpx.ConnectError) as exc:
                repeatable = idempotent or isinstance(exc, UNSENT_REQUEST_ERRORS)
                if not repeatable:
                    raise HttpError("http_outcome_unknown", is_retryable=False) from exc
                if attempt >= config.max_retries:
                    raise HttpError("http_connection_error", is_retryable=True) from exc
                reason = type(exc).__name__

            delay = config.backoff_for(attempt)
            logger.info(
                "http_retry_scheduled",
                extra={
                    "method": method,
                    "attempt": attempt + 1,
                    "reason": reason,
                    "backoff_seconds": delay,
                },
            )
            await asyncio.sleep(delay)
            attempt += 1

    async def _send_once(
        self,
        method: str,
        url: str,
        request_kwargs: dict[str, Any],
    ) -> httpx.Response:
        async with httpx.AsyncClient(
            verify=self._config.verify_ssl,
            transport=self._transport,
        ) as client:
            response = await client.request(method, url, **request_kwargs)
        if _is_retryable_status(response.status_code):
            raise HttpError(
                "http_retryable_status",
                status_code=response.status_code,
                is_retryable=True,
            )
        return response
