"""Catálogo estático de operações Daraja.

Cada par (Resource, Operation) aponta para o path do endpoint, a lista
ordenada de parâmetros obrigatórios e o builder puro do corpo JSON.
O catálogo é imutável e verificado na importação: um par declarado sem
entrada é erro de configuração, nunca falha em runtime.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

from api.payload_builders.daraja import account, b2b, b2c, c2b, identity, pull, stk_push
from api.validators.daraja.errors import UnsupportedOperationError
from app.constants.daraja import Operation, Resource

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.protocols.payload_builder import BodyBuilder

_INITIATOR = ("initiatorName", "securityCredential")
_RESULT_URLS = ("remarks", "queueTimeOutUrl", "resultUrl")


@dataclass(frozen=True, slots=True)
class OperationSpec:
    """Definição imutável de uma operação do catálogo."""

    resource: Resource
    operation: Operation
    path: str
    required: tuple[str, ...]
    build: BodyBuilder


_SPECS: tuple[OperationSpec, ...] = (
    OperationSpec(
        Resource.STK_PUSH,
        Operation.INITIATE,
        "/mpesa/stkpush/v1/processrequest",
        (
            "businessShortCode", "passkey", "amount", "phoneNumber",
            "callbackUrl", "accountReference", "transactionDesc",
        ),
        stk_push.build_initiate_body,
    ),
    OperationSpec(
        Resource.STK_PUSH,
        Operation.QUERY_STATUS,
        "/mpesa/stkpushquery/v1/query",
        ("businessShortCode", "passkey", "checkoutRequestId"),
        stk_push.build_query_status_body,
    ),
    OperationSpec(
        Resource.C2B,
        Operation.REGISTER_URL,
        "/mpesa/c2b/v1/registerurl",
        ("shortCode", "confirmationUrl", "validationUrl"),
        c2b.build_register_url_body,
    ),
    OperationSpec(
        Resource.C2B,
        Operation.SIMULATE,
        "/mpesa/c2b/v1/simulate",
        ("shortCode", "commandId", "amount", "msisdn"),
        c2b.build_simulate_body,
    ),
    OperationSpec(
        Resource.B2C,
        Operation.PAYMENT_REQUEST,
        "/mpesa/b2c/v1/paymentrequest",
        (*_INITIATOR, "commandId", "amount", "partyA", "partyB", *_RESULT_URLS),
        b2c.build_payment_request_body,
    ),
    OperationSpec(
        Resource.B2B,
        Operation.PAYMENT_REQUEST,
        "/mpesa/b2b/v1/paymentrequest",
        (
            *_INITIATOR, "commandId", "amount", "partyA", "partyB",
            *_RESULT_URLS, "accountReference",
        ),
        b2b.build_payment_request_body,
    ),
    OperationSpec(
        Resource.IDENTITY,
        Operation.CHECK_ATI,
        "/mpesa/checkidentity/v1/processrequest",
        (*_INITIATOR, "customerNumber"),
        identity.build_check_ati_body,
    ),
    OperationSpec(
        Resource.PULL,
        Operation.REGISTER_URL,
        "/pulltransactions/v1/register",
        ("shortCode", "nominatedNumber", "callbackUrl"),
        pull.build_register_url_body,
    ),
    OperationSpec(
        Resource.PULL,
        Operation.QUERY,
        "/pulltransactions/v1/query",
        ("shortCode", "startDate", "endDate", "offsetValue"),
        pull.build_query_body,
    ),
    OperationSpec(
        Resource.ACCOUNT,
        Operation.BALANCE,
        "/mpesa/accountbalance/v1/query",
        (*_INITIATOR, "partyA", *_RESULT_URLS),
        account.build_balance_body,
    ),
    OperationSpec(
        Resource.ACCOUNT,
        Operation.TRANSACTION_STATUS,
        "/mpesa/transactionstatus/v1/query",
        (*_INITIATOR, "transactionId", "partyA", *_RESULT_URLS),
        account.build_transaction_status_body,
    ),
    OperationSpec(
        Resource.ACCOUNT,
        Operation.REVERSAL,
        "/mpesa/reversal/v1/request",
        (*_INITIATOR, "transactionId", "amount", "receiverParty", *_RESULT_URLS),
        account.build_reversal_body,
    ),
)

# Operações suportadas por recurso (o que o fornecedor expõe)
SUPPORTED_OPERATIONS: Mapping[Resource, frozenset[Operation]] = MappingProxyType(
    {
        Resource.STK_PUSH: frozenset({Operation.INITIATE, Operation.QUERY_STATUS}),
        Resource.C2B: frozenset({Operation.REGISTER_URL, Operation.SIMULATE}),
        Resource.B2C: frozenset({Operation.PAYMENT_REQUEST}),
        Resource.B2B: frozenset({Operation.PAYMENT_REQUEST}),
        Resource.IDENTITY: frozenset({Operation.CHECK_ATI}),
        Resource.PULL: frozenset({Operation.REGISTER_URL, Operation.QUERY}),
        Resource.ACCOUNT: frozenset(
            {Operation.BALANCE, Operation.TRANSACTION_STATUS, Operation.REVERSAL}
        ),
    }
)

OPERATION_CATALOG: Mapping[tuple[Resource, Operation], OperationSpec] = MappingProxyType(
    {(spec.resource, spec.operation): spec for spec in _SPECS}
)


def validate_catalog() -> None:
    """Garante que todo par suportado tem entrada no catálogo e vice-versa.

    Raises:
        RuntimeError: Se o catálogo estiver incompleto ou com entradas extras
    """
    declared = {
        (resource, operation)
        for resource, operations in SUPPORTED_OPERATIONS.items()
        for operation in operations
    }
    missing = declared - OPERATION_CATALOG.keys()
    extra = OPERATION_CATALOG.keys() - declared
    if missing or extra or len(_SPECS) != len(OPERATION_CATALOG):
        raise RuntimeError(
            f"Operation catalog mismatch: missing={sorted(missing)} extra={sorted(extra)}"
        )


def catalog_key(resource: Resource | str, operation: Operation | str) -> tuple[Resource, Operation]:
    """Converte tags (string ou enum) na chave do catálogo.

    Raises:
        UnsupportedOperationError: Se o par não existir no catálogo
    """
    try:
        key = (Resource(resource), Operation(operation))
    except ValueError as exc:
        raise UnsupportedOperationError(str(resource), str(operation)) from exc
    if key not in OPERATION_CATALOG:
        raise UnsupportedOperationError(str(resource), str(operation))
    return key


def get_operation_spec(resource: Resource | str, operation: Operation | str) -> OperationSpec:
    """Retorna a OperationSpec do par (resource, operation).

    Raises:
        UnsupportedOperationError: Se o par não existir no catálogo
    """
    return OPERATION_CATALOG[catalog_key(resource, operation)]


validate_catalog()
