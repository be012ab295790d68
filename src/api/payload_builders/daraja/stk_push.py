"""Builders de STK Push (initiate e query status)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.payload_builders.daraja.base import optional_text_param, text_param
from api.payload_builders.daraja.password import derive_password
from api.validators.daraja.params import format_decimal, validate_choice
from app.constants.daraja import DEFAULT_STK_TRANSACTION_TYPE, STK_TRANSACTION_TYPES

if TYPE_CHECKING:
    from collections.abc import Mapping


def build_initiate_body(params: Mapping[str, Any], timestamp: str) -> dict[str, Any]:
    """Constrói corpo de STK Push (processrequest).

    PartyA e PhoneNumber recebem o telefone; PartyB recebe o shortcode.
    """
    shortcode = text_param(params, "businessShortCode")
    passkey = text_param(params, "passkey")
    phone_number = text_param(params, "phoneNumber")
    transaction_type = validate_choice(
        "transactionType",
        optional_text_param(params, "transactionType", DEFAULT_STK_TRANSACTION_TYPE),
        STK_TRANSACTION_TYPES,
    )
    return {
        "BusinessShortCode": shortcode,
        "Password": derive_password(shortcode, passkey, timestamp),
        "Timestamp": timestamp,
        "TransactionType": transaction_type,
        "Amount": format_decimal("amount", params["amount"]),
        "PartyA": phone_number,
        "PartyB": shortcode,
        "PhoneNumber": phone_number,
        "CallBackURL": text_param(params, "callbackUrl"),
        "AccountReference": text_param(params, "accountReference"),
        "TransactionDesc": text_param(params, "transactionDesc"),
    }


def build_query_status_body(params: Mapping[str, Any], timestamp: str) -> dict[str, Any]:
    """Constrói corpo de consulta de status do STK Push."""
    shortcode = text_param(params, "businessShortCode")
    passkey = text_param(params, "passkey")
    return {
        "BusinessShortCode": shortcode,
        "Password": derive_password(shortcode, passkey, timestamp),
        "Timestamp": timestamp,
        "CheckoutRequestID": text_param(params, "checkoutRequestId"),
    }
