"""Testes do catálogo estático de operações Daraja."""

from __future__ import annotations

import pytest

from api.payload_builders.daraja import (
    OPERATION_CATALOG,
    SUPPORTED_OPERATIONS,
    catalog_key,
    get_operation_spec,
    validate_catalog,
)
from api.validators.daraja import UnsupportedOperationError
from app.constants.daraja import Operation, Resource

EXPECTED_PATHS = {
    ("stkPush", "initiate"): "/mpesa/stkpush/v1/processrequest",
    ("stkPush", "queryStatus"): "/mpesa/stkpushquery/v1/query",
    ("c2b", "registerUrl"): "/mpesa/c2b/v1/registerurl",
    ("c2b", "simulate"): "/mpesa/c2b/v1/simulate",
    ("b2c", "paymentRequest"): "/mpesa/b2c/v1/paymentrequest",
    ("b2b", "paymentRequest"): "/mpesa/b2b/v1/paymentrequest",
    ("identity", "checkAti"): "/mpesa/checkidentity/v1/processrequest",
    ("pull", "registerUrl"): "/pulltransactions/v1/register",
    ("pull", "query"): "/pulltransactions/v1/query",
    ("account", "balance"): "/mpesa/accountbalance/v1/query",
    ("account", "transactionStatus"): "/mpesa/transactionstatus/v1/query",
    ("account", "reversal"): "/mpesa/reversal/v1/request",
}


def test_every_supported_pair_has_exactly_one_entry() -> None:
    validate_catalog()
    declared = {
        (resource, operation)
        for resource, operations in SUPPORTED_OPERATIONS.items()
        for operation in operations
    }
    assert declared == set(OPERATION_CATALOG)


@pytest.mark.parametrize(("key", "path"), sorted(EXPECTED_PATHS.items()))
def test_paths(key: tuple[str, str], path: str) -> None:
    assert get_operation_spec(*key).path == path


def test_required_parameters_keep_declared_order() -> None:
    spec = get_operation_spec(Resource.STK_PUSH, Operation.INITIATE)
    assert spec.required == (
        "businessShortCode",
        "passkey",
        "amount",
        "phoneNumber",
        "callbackUrl",
        "accountReference",
        "transactionDesc",
    )
    assert get_operation_spec("b2b", "paymentRequest").required[-1] == "accountReference"


def test_catalog_is_read_only() -> None:
    with pytest.raises(TypeError):
        OPERATION_CATALOG[(Resource.C2B, Operation.QUERY)] = None  # type: ignore[index]


@pytest.mark.parametrize(
    ("resource", "operation"),
    [("stkPush", "simulate"), ("c2b", "initiate"), ("wallet", "initiate"), ("b2c", "refund")],
)
def test_unsupported_pairs(resource: str, operation: str) -> None:
    with pytest.raises(UnsupportedOperationError) as exc_info:
        catalog_key(resource, operation)
    assert exc_info.value.resource == resource
    assert exc_info.value.operation == operation


def test_catalog_key_accepts_plain_strings() -> None:
    assert catalog_key("account", "reversal") == (Resource.ACCOUNT, Operation.REVERSAL)
