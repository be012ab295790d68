"""Builders da Pull Transactions API."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.payload_builders.daraja.base import optional_text_param, text_param
from api.validators.daraja.params import format_decimal, format_pull_date
from app.constants.daraja import DEFAULT_PULL_REQUEST_TYPE

if TYPE_CHECKING:
    from collections.abc import Mapping


def build_register_url_body(params: Mapping[str, Any], timestamp: str) -> dict[str, Any]:
    return {
        "ShortCode": text_param(params, "shortCode"),
        "RequestType": optional_text_param(params, "requestType", DEFAULT_PULL_REQUEST_TYPE),
        "NominatedNumber": text_param(params, "nominatedNumber"),
        "CallBackURL": text_param(params, "callbackUrl"),
    }


def build_query_body(params: Mapping[str, Any], timestamp: str) -> dict[str, Any]:
    """Constrói corpo de consulta. OffSetValue é string, como Amount."""
    return {
        "ShortCode": text_param(params, "shortCode"),
        "StartDate": format_pull_date("startDate", params["startDate"]),
        "EndDate": format_pull_date("endDate", params["endDate"]),
        "OffSetValue": format_decimal("offsetValue", params["offsetValue"]),
    }
