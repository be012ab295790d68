"""Bootstrap da aplicação: inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings
e conecta implementações concretas aos protocolos.

Uso:
    from app.bootstrap import initialize_app, create_execute_operations_use_case

    # Na inicialização do serviço
    initialize_app()

    # Lote outbound
    use_case = create_execute_operations_use_case()
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_base_settings, get_daraja_settings

if TYPE_CHECKING:
    from app.protocols.callback_sink import CallbackSinkProtocol
    from app.use_cases.daraja import ExecuteOperationsUseCase
    from config.settings import DarajaSettings

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa a aplicação com todas as configurações necessárias.

    Deve ser chamada uma vez no início do serviço.
    Configura logging estruturado JSON com correlation_id.
    """
    settings = get_base_settings()
    configure_logging(
        level=settings.log_level,
        service_name=settings.service_name,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.
    """
    base_settings = get_base_settings()
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in base_settings.validate())
    errors.extend(f"daraja: {error}" for error in get_daraja_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={
                "component": "bootstrap",
                "result": "ok",
                "environment": base_settings.environment,
            },
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base_settings.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base_settings.strict_validation:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base_settings.environment}:\n{details}")


def create_callback_sink() -> CallbackSinkProtocol:
    """Cria o sink padrão dos eventos emitidos por callbacks."""
    from app.infra.sinks import LoggingCallbackSink

    return LoggingCallbackSink()


def create_security_credential_params(settings: DarajaSettings) -> dict[str, str]:
    """Gera securityCredential a partir da senha do iniciador e do certificado.

    Sem MPESA_INITIATOR_PASSWORD ou MPESA_CERTIFICATE_PATH, retorna vazio e
    cada item do lote deve trazer o próprio securityCredential.

    Raises:
        CredentialCryptoError: Se o certificado for inválido
        OSError: Se o certificado não puder ser lido
    """
    if not settings.initiator_password or not settings.certificate_path:
        return {}

    from app.infra.crypto import encrypt_security_credential

    certificate_pem = Path(settings.certificate_path).read_text(encoding="utf-8")
    credential = encrypt_security_credential(settings.initiator_password, certificate_pem)
    logger.info("daraja_security_credential_configured", extra={"component": "bootstrap"})
    return {"securityCredential": credential}


def create_execute_operations_use_case() -> ExecuteOperationsUseCase:
    """Cria o use case de lote outbound com o client Daraja configurado."""
    from api.connectors.daraja import create_daraja_http_client
    from app.use_cases.daraja import ExecuteOperationsUseCase

    settings = get_daraja_settings()
    return ExecuteOperationsUseCase(
        client=create_daraja_http_client(settings),
        default_params=create_security_credential_params(settings),
    )
