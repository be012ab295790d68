"""Use case para execução de lotes de operações Daraja."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from api.payload_builders.daraja import catalog_key, encode
from app.protocols.models import OperationResult

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence
    from datetime import datetime

    from app.constants.daraja import Operation, Resource
    from app.protocols.http_client import DarajaHttpClientProtocol

logger = logging.getLogger(__name__)


class ExecuteOperationsUseCase:
    """Orquestra encode e envio de cada item do lote.

    Itens são independentes. Com continue_on_fail, o erro de um item vira
    OperationResult.error e os demais seguem; sem ele, o primeiro erro
    interrompe o lote e é propagado.

    default_params completa cada item (ex: securityCredential gerado no
    bootstrap); valores do próprio item prevalecem.
    """

    def __init__(
        self,
        client: DarajaHttpClientProtocol,
        default_params: Mapping[str, Any] | None = None,
    ) -> None:
        self._client = client
        self._default_params = dict(default_params or {})

    async def execute(
        self,
        resource: Resource | str,
        operation: Operation | str,
        items: Sequence[Mapping[str, Any]],
        *,
        continue_on_fail: bool = False,
        now: datetime | None = None,
    ) -> list[OperationResult]:
        """Executa a operação para cada conjunto de parâmetros.

        Raises:
            UnsupportedOperationError: Par fora do catálogo (antes de qualquer envio)
            Exception: Primeiro erro de item quando continue_on_fail=False
        """
        resource_tag, operation_tag = catalog_key(resource, operation)
        results: list[OperationResult] = []
        for index, params in enumerate(items):
            try:
                merged = {**self._default_params, **params}
                descriptor = encode(resource_tag, operation_tag, merged, now)
                response = await self._client.send(descriptor)
            except Exception as exc:
                if not continue_on_fail:
                    raise
                logger.warning(
                    "daraja_operation_item_failed",
                    extra={
                        "resource": resource_tag.value,
                        "operation": operation_tag.value,
                        "item_index": index,
                        "error_type": type(exc).__name__,
                    },
                )
                results.append(OperationResult(index=index, error=str(exc)))
                continue
            results.append(OperationResult(index=index, data=response))

        logger.info(
            "daraja_operations_executed",
            extra={
                "resource": resource_tag.value,
                "operation": operation_tag.value,
                "item_count": len(items),
                "failed_count": sum(1 for result in results if not result.success),
            },
        )
        return results
