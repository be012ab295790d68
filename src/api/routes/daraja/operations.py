"""Endpoint de execução de operações outbound da Daraja.

Endpoints:
- POST /mpesa/operations/{resource}/{operation}: executa um lote de itens

Corpo:
    {"items": [{...parâmetros...}], "continueOnFail": false}

Erros:
- 404: par (resource, operation) fora do catálogo
- 422: parâmetro ausente/inválido (sem continueOnFail)
- 502: erro da Daraja ou de transporte (sem continueOnFail)
- 503: credenciais Daraja não configuradas
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from api.connectors.daraja.daraja_errors import DarajaCredentialsError
from api.connectors.daraja.http_base import HttpError
from api.validators.daraja import UnsupportedOperationError
from app.protocols.validator import ValidationError

if TYPE_CHECKING:
    from app.use_cases.daraja import ExecuteOperationsUseCase

logger = logging.getLogger(__name__)

router = APIRouter()

# Lazy-loaded use case (inicializado na primeira requisição)
_operations_use_case: ExecuteOperationsUseCase | None = None


class OperationBatchRequest(BaseModel):
    """Lote de parâmetros para uma mesma operação."""

    model_config = ConfigDict(populate_by_name=True)

    items: list[dict[str, Any]] = Field(min_length=1)
    continue_on_fail: bool = Field(default=False, alias="continueOnFail")


def _get_operations_use_case() -> ExecuteOperationsUseCase:
    """Obtém o use case de lote outbound (lazy-loading)."""
    global _operations_use_case
    if _operations_use_case is None:
        from app.bootstrap import create_execute_operations_use_case

        _operations_use_case = create_execute_operations_use_case()
    return _operations_use_case


def _error_response(status_code: int, error: str, **extra: Any) -> JSONResponse:
    return JSONResponse(content={"error": error, **extra}, status_code=status_code)


@router.post("/{resource}/{operation}", response_model=None)
async def execute_operation(
    resource: str,
    operation: str,
    batch: OperationBatchRequest,
) -> JSONResponse | dict[str, Any]:
    """Codifica e envia cada item do lote para a Daraja.

    Returns:
        {"results": [...]} na ordem dos itens, ou resposta de erro.
    """
    log_extra = {"channel": "mpesa", "resource": resource, "operation": operation}
    try:
        results = await _get_operations_use_case().execute(
            resource,
            operation,
            batch.items,
            continue_on_fail=batch.continue_on_fail,
        )
    except UnsupportedOperationError as exc:
        logger.warning("daraja_operation_unsupported", extra=log_extra)
        return _error_response(status.HTTP_404_NOT_FOUND, str(exc))
    except ValidationError as exc:
        logger.warning(
            "daraja_operation_invalid",
            extra={**log_extra, "error_type": type(exc).__name__},
        )
        return _error_response(status.HTTP_422_UNPROCESSABLE_ENTITY, str(exc))
    except HttpError as exc:
        logger.warning(
            "daraja_operation_upstream_failed",
            extra={**log_extra, "status_code": exc.status_code},
        )
        return _error_response(
            status.HTTP_502_BAD_GATEWAY,
            str(exc),
            upstreamStatus=exc.status_code,
        )
    except DarajaCredentialsError as exc:
        logger.error("daraja_operation_not_configured", extra=log_extra)
        return _error_response(status.HTTP_503_SERVICE_UNAVAILABLE, str(exc))

    return {"results": [result.as_dict() for result in results]}
