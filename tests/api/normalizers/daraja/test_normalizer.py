"""Testes dos decoders de callback Daraja e do despacho por EventKind."""

from __future__ import annotations

import copy
from datetime import UTC, datetime

import pytest

from api.normalizers.daraja import get_decoder, normalize
from app.constants.daraja import EventKind, PaymentStatus, TransactionType

NOW = datetime(2024, 1, 1, 9, 0, tzinfo=UTC)
NOW_ISO = "2024-01-01T09:00:00+00:00"


def _stk_success() -> dict:
    return {
        "Body": {
            "stkCallback": {
                "MerchantRequestID": "29115-34620561-1",
                "CheckoutRequestID": "ws_CO_191220191020363925",
                "ResultCode": 0,
                "ResultDesc": "The service request is processed successfully.",
                "CallbackMetadata": {
                    "Item": [
                        {"Name": "Amount", "Value": 100},
                        {"Name": "MpesaReceiptNumber", "Value": "NLJ7RT61SV"},
                        {"Name": "TransactionDate", "Value": 20191219102115},
                        {"Name": "PhoneNumber", "Value": 254708374149},
                    ]
                },
            }
        }
    }


def _result(result_code: int | str, parameters: list[dict] | None = None, **extra: object) -> dict:
    result: dict = {
        "ResultType": 0,
        "ResultCode": result_code,
        "ResultDesc": "The service request is processed successfully.",
        "OriginatorConversationID": "10571-7910404-1",
        "ConversationID": "AG_20191219_00004e48cf7e3533f581",
        "TransactionID": "NLJ41HAY6Q",
        **extra,
    }
    if parameters is not None:
        result["ResultParameters"] = {"ResultParameter": parameters}
    return {"Result": result}


class TestDispatch:
    def test_every_event_kind_has_a_decoder(self) -> None:
        for kind in EventKind:
            assert callable(get_decoder(kind))

    def test_unknown_event_kind_is_configuration_error(self) -> None:
        with pytest.raises(ValueError):
            normalize("payment.refunded", {})

    def test_string_event_kind_is_accepted(self) -> None:
        record = normalize("payment.received", {"TransID": "X1"}, NOW)
        assert record.transaction_type == TransactionType.C2B


class TestC2B:
    def test_confirmation(self) -> None:
        envelope = {
            "TransactionType": "Pay Bill",
            "TransID": "RKTQDM7W6S",
            "TransTime": "20191122063845",
            "TransAmount": "10",
            "BusinessShortCode": "600638",
            "BillRefNumber": "invoice008",
            "MSISDN": "25470****149",
        }
        record = normalize(EventKind.PAYMENT_RECEIVED, envelope, NOW)

        assert record.transaction_id == "RKTQDM7W6S"
        assert record.amount == 10.0
        assert record.status == PaymentStatus.SUCCESS
        assert record.result_code == 0
        assert record.result_description == "Payment received"
        assert record.phone_number == "25470****149"
        assert record.account_reference == "invoice008"
        assert record.timestamp == "2019-11-22T06:38:45+03:00"

    def test_oversized_amount_resolves_to_zero(self) -> None:
        record = normalize(EventKind.PAYMENT_RECEIVED, {"TransID": "X", "TransAmount": 10**400}, NOW)

        assert record.transaction_id == "X"
        assert record.amount == 0.0


class TestStkPush:
    def test_success(self) -> None:
        record = normalize(EventKind.STK_PUSH_COMPLETED, _stk_success(), NOW)

        assert record.transaction_id == "NLJ7RT61SV"
        assert record.transaction_type == TransactionType.STK_PUSH
        assert record.amount == 100.0
        assert record.status == PaymentStatus.SUCCESS
        assert record.phone_number == "254708374149"
        assert record.timestamp == "2019-12-19T10:21:15+03:00"

    def test_cancelled_falls_back_to_checkout_request_id(self) -> None:
        envelope = {
            "Body": {
                "stkCallback": {
                    "MerchantRequestID": "8555-67195-1",
                    "CheckoutRequestID": "ws_CO_27072017151044001",
                    "ResultCode": 1032,
                    "ResultDesc": "Request cancelled by user",
                }
            }
        }
        record = normalize(EventKind.STK_PUSH_COMPLETED, envelope, NOW)

        assert record.transaction_id == "ws_CO_27072017151044001"
        assert record.status == PaymentStatus.FAILED
        assert record.result_code == 1032
        assert record.result_description == "Request cancelled by user"
        assert record.amount == 0.0
        assert record.phone_number is None
        assert record.timestamp == NOW_ISO

    @pytest.mark.parametrize(
        "envelope",
        [{}, None, [], "text", {"Body": None}, {"Body": {"stkCallback": {"CallbackMetadata": 5}}}],
    )
    def test_malformed_envelopes_still_produce_a_record(self, envelope: object) -> None:
        record = normalize(EventKind.STK_PUSH_COMPLETED, envelope, NOW)

        assert record.transaction_id == ""
        assert record.amount == 0.0
        assert record.result_code == 0
        assert record.timestamp == NOW_ISO
        assert record.raw_payload is envelope


class TestResultCallbacks:
    def test_b2c(self) -> None:
        envelope = _result(
            0,
            [
                {"Key": "TransactionAmount", "Value": 10},
                {"Key": "TransactionReceipt", "Value": "NLJ41HAY6Q"},
                {"Key": "ReceiverPartyPublicName", "Value": "254708374149 - John Doe"},
            ],
        )
        record = normalize(EventKind.B2C_COMPLETED, envelope, NOW)

        assert record.transaction_type == TransactionType.B2C
        assert record.transaction_id == "NLJ41HAY6Q"
        assert record.amount == 10.0
        assert record.phone_number == "254708374149 - John Doe"
        assert record.status == PaymentStatus.SUCCESS
        assert record.timestamp == NOW_ISO

    def test_b2c_failure_without_parameters(self) -> None:
        envelope = _result(2001, ResultDesc="The initiator information is invalid.")
        record = normalize(EventKind.B2C_COMPLETED, envelope, NOW)

        assert record.status == PaymentStatus.FAILED
        assert record.result_code == 2001
        assert record.transaction_id == "NLJ41HAY6Q"
        assert record.amount == 0.0

    def test_b2b_amount_fallback_and_account_reference(self) -> None:
        envelope = _result(
            "0",
            [
                {"Key": "Amount", "Value": "190.00"},
                {"Key": "DebitAccountBalance", "Value": "{Amount={CurrencyCode=KES}}"},
            ],
        )
        record = normalize(EventKind.B2B_COMPLETED, envelope, NOW)

        assert record.transaction_id == "NLJ41HAY6Q"
        assert record.amount == 190.0
        assert record.account_reference == "{Amount={CurrencyCode=KES}}"
        assert record.status == PaymentStatus.SUCCESS

    def test_reversal_prefers_wrapper_transaction_id(self) -> None:
        envelope = _result(
            0,
            [
                {"Key": "OriginalTransactionID", "Value": "OEI2AK4Q16"},
                {"Key": "Amount", "Value": 1},
            ],
        )
        record = normalize(EventKind.REVERSAL_COMPLETED, envelope, NOW)
        assert record.transaction_id == "NLJ41HAY6Q"
        assert record.amount == 1.0

        del envelope["Result"]["TransactionID"]
        assert normalize(EventKind.REVERSAL_COMPLETED, envelope, NOW).transaction_id == "OEI2AK4Q16"

    def test_balance(self) -> None:
        envelope = _result(0, [{"Key": "AccountBalance", "Value": "Working Account|KES|700000.00"}])
        record = normalize(EventKind.BALANCE_COMPLETED, envelope, NOW)

        assert record.transaction_type == TransactionType.BALANCE
        assert record.transaction_id == "AG_20191219_00004e48cf7e3533f581"
        assert record.amount == 0.0
        assert record.account_reference == "Working Account|KES|700000.00"


class TestTransactionStatus:
    def _envelope(self, result_code: int, status: str) -> dict:
        return _result(
            result_code,
            [
                {"Key": "ReceiptNo", "Value": "OEI2AK4Q16"},
                {"Key": "Amount", "Value": 100},
                {"Key": "TransactionStatus", "Value": status},
                {"Key": "FinalisedTime", "Value": 20231005143000},
                {"Key": "DebitPartyName", "Value": "254708374149 - John Doe"},
                {"Key": "CreditPartyPublicName", "Value": "600000 - Shop"},
            ],
        )

    @pytest.mark.parametrize(
        ("result_code", "transaction_status", "expected"),
        [
            (0, "Completed", PaymentStatus.SUCCESS),
            (1, "Completed", PaymentStatus.SUCCESS),
            (0, "Pending", PaymentStatus.SUCCESS),
            (1, "Pending", PaymentStatus.FAILED),
        ],
    )
    def test_success_is_completed_or_zero_code(
        self, result_code: int, transaction_status: str, expected: PaymentStatus
    ) -> None:
        record = normalize(
            EventKind.TRANSACTION_STATUS_COMPLETED,
            self._envelope(result_code, transaction_status),
            NOW,
        )
        assert record.status == expected
        assert record.result_code == result_code

    def test_fields(self) -> None:
        record = normalize(
            EventKind.TRANSACTION_STATUS_COMPLETED, self._envelope(0, "Completed"), NOW
        )
        assert record.transaction_id == "OEI2AK4Q16"
        assert record.amount == 100.0
        assert record.phone_number == "600000 - Shop"
        assert record.timestamp == "2023-10-05T14:30:00+03:00"


class TestRecordInvariants:
    def test_raw_payload_is_the_same_untouched_envelope(self) -> None:
        envelope = _stk_success()
        snapshot = copy.deepcopy(envelope)

        record = normalize(EventKind.STK_PUSH_COMPLETED, envelope, NOW)

        assert record.raw_payload is envelope
        assert envelope == snapshot

    def test_normalization_is_idempotent(self) -> None:
        envelope = _stk_success()
        first = normalize(EventKind.STK_PUSH_COMPLETED, envelope, NOW)
        second = normalize(EventKind.STK_PUSH_COMPLETED, envelope, NOW)
        assert first == second

    def test_payload_uses_camel_case_and_omits_absent_optionals(self) -> None:
        record = normalize(EventKind.REVERSAL_COMPLETED, _result(0, []), NOW)
        payload = record.to_payload()

        assert payload == {
            "transactionId": "NLJ41HAY6Q",
            "transactionType": "reversal",
            "amount": 0.0,
            "status": "success",
            "resultCode": 0,
            "resultDescription": "The service request is processed successfully.",
            "timestamp": NOW_ISO,
            "rawPayload": record.raw_payload,
        }
        assert payload["rawPayload"] is record.raw_payload
