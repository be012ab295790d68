"""Settings específicas da Daraja (M-Pesa).

Configurações do conector Daraja e da política dos listeners de callback.
Cada listener herda MPESA_SUCCESS_ONLY / MPESA_NORMALIZE_OUTPUT e pode
sobrescrevê-los com MPESA_<LISTENER>_SUCCESS_ONLY e
MPESA_<LISTENER>_NORMALIZE_OUTPUT, onde <LISTENER> é o tipo de evento em
maiúsculas com separadores trocados por "_" (ex: stkpush.completed ->
MPESA_STKPUSH_COMPLETED_SUCCESS_ONLY).
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path

# URLs base por ambiente
DARAJA_BASE_URLS: dict[str, str] = {
    "sandbox": "https://sandbox.safaricom.co.ke",
    "production": "https://api.safaricom.co.ke",
}

_ENV_PREFIX = "MPESA_"
SUCCESS_ONLY_SUFFIX = "_SUCCESS_ONLY"
NORMALIZE_OUTPUT_SUFFIX = "_NORMALIZE_OUTPUT"


def listener_env_key(listener: str) -> str:
    """Chave de env de um listener (ex: transaction.status.completed -> TRANSACTION_STATUS_COMPLETED)."""
    return re.sub(r"[^A-Za-z0-9]+", "_", listener).strip("_").upper()


@dataclass(frozen=True)
class DarajaSettings:
    """Configurações da integração Daraja.

    Attributes:
        consumer_key: Consumer key do app no portal Daraja
        consumer_secret: Consumer secret do app no portal Daraja
        environment: sandbox ou production
        api_base_url: Override da URL base (vazio = derivada do ambiente)
        request_timeout_seconds: Timeout para requisições HTTP
        max_retries: Máximo de tentativas em erro transitório
        token_expiry_margin_seconds: Antecedência para renovar o token OAuth
        initiator_password: Senha do iniciador (gera o SecurityCredential)
        certificate_path: Certificado Daraja em PEM que cifra a senha
        success_only: Default dos listeners (suprime callbacks com falha)
        normalize_output: Default dos listeners (emite registro normalizado)
        success_only_overrides: success_only por listener (chave de env)
        normalize_output_overrides: normalize_output por listener (chave de env)
    """

    # Credenciais (carregadas de env)
    consumer_key: str = ""
    consumer_secret: str = ""
    initiator_password: str = ""
    certificate_path: str = ""

    # API
    environment: str = "sandbox"
    api_base_url: str = ""

    # Timeouts e retries
    request_timeout_seconds: float = 30.0
    max_retries: int = 3
    token_expiry_margin_seconds: int = 60

    # Política dos callbacks
    success_only: bool = True
    normalize_output: bool = True
    success_only_overrides: dict[str, bool] = field(default_factory=dict)
    normalize_output_overrides: dict[str, bool] = field(default_factory=dict)

    @property
    def base_url(self) -> str:
        """URL base efetiva (override ou derivada do ambiente)."""
        if self.api_base_url:
            return self.api_base_url.rstrip("/")
        return DARAJA_BASE_URLS.get(self.environment, DARAJA_BASE_URLS["sandbox"])

    def success_only_for(self, listener: str) -> bool:
        return self.success_only_overrides.get(listener_env_key(listener), self.success_only)

    def normalize_output_for(self, listener: str) -> bool:
        return self.normalize_output_overrides.get(
            listener_env_key(listener), self.normalize_output
        )

    def validate(self) -> list[str]:
        """Valida configurações mínimas da Daraja.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.consumer_key:
            errors.append("MPESA_CONSUMER_KEY não configurado")

        if not self.consumer_secret:
            errors.append("MPESA_CONSUMER_SECRET não configurado")

        if self.environment not in DARAJA_BASE_URLS:
            errors.append("MPESA_ENVIRONMENT deve ser 'sandbox' ou 'production'")

        if self.request_timeout_seconds <= 0:
            errors.append("MPESA_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if self.max_retries < 0:
            errors.append("MPESA_MAX_RETRIES deve ser >= 0")

        if self.token_expiry_margin_seconds < 0:
            errors.append("MPESA_TOKEN_EXPIRY_MARGIN_SECONDS deve ser >= 0")

        if self.initiator_password and not self.certificate_path:
            errors.append("MPESA_CERTIFICATE_PATH é obrigatório com MPESA_INITIATOR_PASSWORD")
        elif self.certificate_path and not Path(self.certificate_path).is_file():
            errors.append(f"MPESA_CERTIFICATE_PATH não encontrado: {self.certificate_path}")

        return errors


def _parse_bool(value: str, default: bool) -> bool:
    if not value.strip():
        return default
    return value.strip().lower() in ("true", "1", "yes")


def _load_listener_overrides(suffix: str) -> dict[str, bool]:
    """Lê MPESA_<LISTENER><suffix>; a variável global (sem listener) é ignorada."""
    overrides: dict[str, bool] = {}
    for name, value in os.environ.items():
        if not (name.startswith(_ENV_PREFIX) and name.endswith(suffix)) or not value.strip():
            continue
        listener = name[len(_ENV_PREFIX) : -len(suffix)]
        if listener:
            overrides[listener] = _parse_bool(value, default=True)
    return overrides


def _load_from_env() -> DarajaSettings:
    """Carrega DarajaSettings a partir de variáveis de ambiente."""
    return DarajaSettings(
        consumer_key=os.getenv("MPESA_CONSUMER_KEY", ""),
        consumer_secret=os.getenv("MPESA_CONSUMER_SECRET", ""),
        initiator_password=os.getenv("MPESA_INITIATOR_PASSWORD", ""),
        certificate_path=os.getenv("MPESA_CERTIFICATE_PATH", "").strip(),
        environment=os.getenv("MPESA_ENVIRONMENT", "sandbox").strip().lower(),
        api_base_url=os.getenv("MPESA_API_BASE_URL", ""),
        request_timeout_seconds=float(os.getenv("MPESA_REQUEST_TIMEOUT_SECONDS", "30")),
        max_retries=int(os.getenv("MPESA_MAX_RETRIES", "3")),
        token_expiry_margin_seconds=int(os.getenv("MPESA_TOKEN_EXPIRY_MARGIN_SECONDS", "60")),
        success_only=_parse_bool(os.getenv("MPESA_SUCCESS_ONLY", ""), default=True),
        normalize_output=_parse_bool(os.getenv("MPESA_NORMALIZE_OUTPUT", ""), default=True),
        success_only_overrides=_load_listener_overrides(SUCCESS_ONLY_SUFFIX),
        normalize_output_overrides=_load_listener_overrides(NORMALIZE_OUTPUT_SUFFIX),
    )


@lru_cache(maxsize=1)
def get_daraja_settings() -> DarajaSettings:
    """Retorna instância cacheada de DarajaSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
