"""Testes do use case de lote outbound."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

import pytest

from api.connectors.daraja.http_base import HttpError
from api.validators.daraja import MissingParameterError, UnsupportedOperationError
from app.protocols.models import RequestDescriptor
from app.use_cases.daraja import ExecuteOperationsUseCase

NOW = datetime(2023, 10, 5, 11, 30, tzinfo=UTC)


class FakeDarajaClient:
    def __init__(self, fail_on: set[str] | None = None) -> None:
        self.sent: list[RequestDescriptor] = []
        self._fail_on = fail_on or set()

    async def send(self, descriptor: RequestDescriptor) -> dict[str, Any]:
        self.sent.append(descriptor)
        msisdn = descriptor.body.get("Msisdn")
        if msisdn in self._fail_on:
            raise HttpError("Daraja API error: 400.002.02 (Bad Request)", status_code=400)
        return {"ResponseCode": "0", "ResponseDescription": "Accept the service request successfully."}


def _simulate(msisdn: str, **overrides: object) -> dict[str, object]:
    params: dict[str, object] = {
        "shortCode": "600000",
        "commandId": "CustomerPayBillOnline",
        "amount": 10,
        "msisdn": msisdn,
    }
    params.update(overrides)
    return params


@pytest.mark.asyncio
async def test_executes_every_item_in_order() -> None:
    client = FakeDarajaClient()
    use_case = ExecuteOperationsUseCase(client)

    results = await use_case.execute("c2b", "simulate", [_simulate("1"), _simulate("2")], now=NOW)

    assert [result.index for result in results] == [0, 1]
    assert all(result.success for result in results)
    assert [d.body["Msisdn"] for d in client.sent] == ["1", "2"]
    assert client.sent[0].path == "/mpesa/c2b/v1/simulate"


@pytest.mark.asyncio
async def test_first_error_propagates_without_continue_on_fail() -> None:
    client = FakeDarajaClient(fail_on={"1"})
    use_case = ExecuteOperationsUseCase(client)

    with pytest.raises(HttpError):
        await use_case.execute("c2b", "simulate", [_simulate("1"), _simulate("2")])

    assert len(client.sent) == 1


@pytest.mark.asyncio
async def test_continue_on_fail_records_item_errors() -> None:
    client = FakeDarajaClient(fail_on={"2"})
    use_case = ExecuteOperationsUseCase(client)
    items = [_simulate("1"), _simulate("2"), _simulate("3", amount=None)]

    results = await use_case.execute("c2b", "simulate", items, continue_on_fail=True)

    assert [result.success for result in results] == [True, False, False]
    assert results[1].as_dict() == {"error": "Daraja API error: 400.002.02 (Bad Request)"}
    assert "amount" in results[2].error
    assert results[0].as_dict()["ResponseCode"] == "0"
    assert len(client.sent) == 2


@pytest.mark.asyncio
async def test_validation_error_propagates() -> None:
    use_case = ExecuteOperationsUseCase(FakeDarajaClient())
    with pytest.raises(MissingParameterError):
        await use_case.execute("c2b", "simulate", [{"shortCode": "600000"}])


@pytest.mark.asyncio
async def test_unsupported_operation_fails_before_sending() -> None:
    client = FakeDarajaClient()
    use_case = ExecuteOperationsUseCase(client)

    with pytest.raises(UnsupportedOperationError):
        await use_case.execute("c2b", "refund", [_simulate("1")], continue_on_fail=True)

    assert client.sent == []


@pytest.mark.asyncio
async def test_default_params_fill_items_and_item_values_win() -> None:
    client = FakeDarajaClient()
    use_case = ExecuteOperationsUseCase(client, default_params={"securityCredential": "ENC=="})
    item = {
        "initiatorName": "testapi",
        "commandId": "BusinessPayment",
        "amount": 10,
        "partyA": "600000",
        "partyB": "254708374149",
        "remarks": "payout",
        "queueTimeOutUrl": "https://example.com/timeout",
        "resultUrl": "https://example.com/result",
    }

    await use_case.execute("b2c", "paymentRequest", [item, {**item, "securityCredential": "OWN=="}])

    assert [d.body["SecurityCredential"] for d in client.sent] == ["ENC==", "OWN=="]
