"""Builders do recurso account (saldo, status de transação, estorno)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.payload_builders.daraja.base import optional_text_param, text_param
from api.validators.daraja.params import format_decimal, validate_identifier_type
from app.constants.daraja import (
    ACCOUNT_BALANCE_COMMAND_ID,
    REVERSAL_COMMAND_ID,
    TRANSACTION_STATUS_COMMAND_ID,
    IdentifierType,
)

if TYPE_CHECKING:
    from collections.abc import Mapping


def _initiator_fields(params: Mapping[str, Any]) -> dict[str, Any]:
    return {
        "Initiator": text_param(params, "initiatorName"),
        "SecurityCredential": text_param(params, "securityCredential"),
    }


def _result_fields(params: Mapping[str, Any]) -> dict[str, Any]:
    return {
        "Remarks": text_param(params, "remarks"),
        "QueueTimeOutURL": text_param(params, "queueTimeOutUrl"),
        "ResultURL": text_param(params, "resultUrl"),
    }


def build_balance_body(params: Mapping[str, Any], timestamp: str) -> dict[str, Any]:
    """Consulta de saldo: IdentifierType é sempre shortcode (4)."""
    return {
        **_initiator_fields(params),
        "CommandID": ACCOUNT_BALANCE_COMMAND_ID,
        "PartyA": text_param(params, "partyA"),
        "IdentifierType": validate_identifier_type(
            "identifierType",
            params.get("identifierType", IdentifierType.SHORTCODE),
        ),
        **_result_fields(params),
    }


def build_transaction_status_body(params: Mapping[str, Any], timestamp: str) -> dict[str, Any]:
    return {
        **_initiator_fields(params),
        "CommandID": TRANSACTION_STATUS_COMMAND_ID,
        "TransactionID": text_param(params, "transactionId"),
        "PartyA": text_param(params, "partyA"),
        "IdentifierType": validate_identifier_type(
            "identifierType",
            params.get("identifierType", IdentifierType.SHORTCODE),
        ),
        **_result_fields(params),
        "Occasion": optional_text_param(params, "occasion"),
    }


def build_reversal_body(params: Mapping[str, Any], timestamp: str) -> dict[str, Any]:
    """Estorno de transação.

    RecieverIdentifierType segue a grafia do fornecedor e é sempre 11
    (organização que recebe o estorno).
    """
    return {
        **_initiator_fields(params),
        "CommandID": REVERSAL_COMMAND_ID,
        "TransactionID": text_param(params, "transactionId"),
        "Amount": format_decimal("amount", params["amount"]),
        "ReceiverParty": text_param(params, "receiverParty"),
        "RecieverIdentifierType": int(IdentifierType.REVERSAL_ORGANIZATION),
        **_result_fields(params),
        "Occasion": optional_text_param(params, "occasion"),
    }
