"""Testes do filtro de sucesso e do reconhecimento de callbacks."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from app.constants.daraja import EventKind
from app.protocols.models import CallbackPolicy
from app.use_cases.daraja import acknowledge, filter_record, process_callback

NOW = datetime(2024, 1, 1, 9, 0, tzinfo=UTC)

CANCELLED_STK = {
    "Body": {
        "stkCallback": {
            "CheckoutRequestID": "ws_CO_27072017151044001",
            "ResultCode": 1032,
            "ResultDesc": "Request cancelled by user",
        }
    }
}

C2B_CONFIRMATION = {
    "TransID": "RKTQDM7W6S",
    "TransTime": "20191122063845",
    "TransAmount": "10",
    "BillRefNumber": "invoice008",
}


def test_acknowledgement_is_fixed() -> None:
    assert acknowledge().as_dict() == {"ResultCode": 0, "ResultDesc": "Accepted"}


def test_failed_record_is_suppressed_but_acknowledged() -> None:
    result = process_callback(EventKind.STK_PUSH_COMPLETED, CANCELLED_STK, now=NOW)

    assert result.acknowledgement.as_dict() == {"ResultCode": 0, "ResultDesc": "Accepted"}
    assert result.emission.emitted is False
    assert result.emission.data is None
    assert result.emission.record is not None
    assert result.emission.record.result_code == 1032


def test_failed_record_is_emitted_when_success_only_is_off() -> None:
    policy = CallbackPolicy(success_only=False)
    result = process_callback(EventKind.STK_PUSH_COMPLETED, CANCELLED_STK, policy, NOW)

    assert result.emission.emitted is True
    assert result.emission.data["status"] == "failed"
    assert result.emission.data["transactionId"] == "ws_CO_27072017151044001"


def test_raw_envelope_is_emitted_when_normalization_is_off() -> None:
    policy = CallbackPolicy(normalize_output=False)
    result = process_callback(EventKind.PAYMENT_RECEIVED, C2B_CONFIRMATION, policy, NOW)

    assert result.emission.emitted is True
    assert result.emission.data is C2B_CONFIRMATION


def test_default_policy_emits_normalized_success() -> None:
    result = process_callback("payment.received", C2B_CONFIRMATION, now=NOW)

    assert result.emission.data["transactionId"] == "RKTQDM7W6S"
    assert result.emission.data["accountReference"] == "invoice008"
    assert result.emission.data["rawPayload"] is C2B_CONFIRMATION


@pytest.mark.parametrize(
    ("success_only", "normalize_output", "emitted"),
    [(True, True, False), (True, False, False), (False, True, True), (False, False, True)],
)
def test_filter_matrix_for_failed_record(
    success_only: bool, normalize_output: bool, emitted: bool
) -> None:
    record = process_callback(
        EventKind.STK_PUSH_COMPLETED,
        CANCELLED_STK,
        CallbackPolicy(success_only=False),
        NOW,
    ).emission.record
    assert record is not None

    emission = filter_record(
        record,
        CANCELLED_STK,
        CallbackPolicy(success_only=success_only, normalize_output=normalize_output),
    )
    assert emission.emitted is emitted
