"""Builders de C2B (registro de URLs e simulação)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.payload_builders.daraja.base import optional_text_param, text_param
from api.validators.daraja.params import format_decimal, validate_choice
from app.constants.daraja import C2B_COMMAND_IDS, C2B_SIMULATE_BILL_REF, ResponseType

if TYPE_CHECKING:
    from collections.abc import Mapping


def build_register_url_body(params: Mapping[str, Any], timestamp: str) -> dict[str, Any]:
    response_type = validate_choice(
        "responseType",
        optional_text_param(params, "responseType", ResponseType.COMPLETED),
        {item.value for item in ResponseType},
    )
    return {
        "ShortCode": text_param(params, "shortCode"),
        "ResponseType": response_type,
        "ConfirmationURL": text_param(params, "confirmationUrl"),
        "ValidationURL": text_param(params, "validationUrl"),
    }


def build_simulate_body(params: Mapping[str, Any], timestamp: str) -> dict[str, Any]:
    return {
        "ShortCode": text_param(params, "shortCode"),
        "CommandID": validate_choice("commandId", params["commandId"], C2B_COMMAND_IDS),
        "Amount": format_decimal("amount", params["amount"]),
        "Msisdn": text_param(params, "msisdn"),
        "BillRefNumber": C2B_SIMULATE_BILL_REF,
    }
