"""Settings base do serviço (independentes da integração Daraja)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

Environment = Literal["development", "staging", "production"]

# Ambientes em que settings inválidas impedem o boot
STRICT_VALIDATION_ENVS = frozenset({"staging", "production"})

_ENVIRONMENT_ALIASES: dict[str, Environment] = {
    "production": "production",
    "prod": "production",
    "staging": "staging",
    "stage": "staging",
}


@dataclass(frozen=True)
class BaseSettings:
    """Configurações base do serviço.

    Attributes:
        environment: development | staging | production
        service_name: Nome publicado em logs e no health check
        log_level: Nível do handler raiz
        docs_enabled: Expõe /docs e /openapi.json
    """

    environment: Environment = "development"
    service_name: str = "daraja_bridge"
    log_level: str = "INFO"
    docs_enabled: bool = True

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def strict_validation(self) -> bool:
        return self.environment in STRICT_VALIDATION_ENVS

    def validate(self) -> list[str]:
        """Retorna erros de configuração (vazia = OK)."""
        errors: list[str] = []
        if self.environment not in ("development", *STRICT_VALIDATION_ENVS):
            errors.append(f"ENVIRONMENT inválido: {self.environment}")
        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")
        return errors


def _parse_environment(raw: str) -> Environment:
    """Normaliza ENVIRONMENT; valores desconhecidos caem em development."""
    return _ENVIRONMENT_ALIASES.get(raw.strip().lower(), "development")


def _load_base_from_env() -> BaseSettings:
    environment = _parse_environment(os.getenv("ENVIRONMENT", "development"))
    docs_default = "false" if environment == "production" else "true"
    return BaseSettings(
        environment=environment,
        service_name=os.getenv("SERVICE_NAME", "daraja_bridge"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        docs_enabled=os.getenv("DOCS_ENABLED", docs_default).lower() in ("true", "1", "yes"),
    )


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    """Retorna instância cacheada de BaseSettings."""
    return _load_base_from_env()
