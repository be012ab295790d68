"""Builder de checagem de identidade do assinante (CheckATI)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.payload_builders.daraja.base import text_param
from app.constants.daraja import CHECK_ATI_COMMAND_ID

if TYPE_CHECKING:
    from collections.abc import Mapping


def build_check_ati_body(params: Mapping[str, Any], timestamp: str) -> dict[str, Any]:
    return {
        "Initiator": text_param(params, "initiatorName"),
        "SecurityCredential": text_param(params, "securityCredential"),
        "CommandID": CHECK_ATI_COMMAND_ID,
        "PartyA": text_param(params, "customerNumber"),
    }
