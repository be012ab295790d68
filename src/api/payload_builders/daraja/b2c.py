"""Builder de B2C (pagamento a cliente)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.payload_builders.daraja.base import text_param
from api.validators.daraja.params import format_decimal, validate_choice
from app.constants.daraja import B2C_COMMAND_IDS

if TYPE_CHECKING:
    from collections.abc import Mapping


def build_payment_request_body(params: Mapping[str, Any], timestamp: str) -> dict[str, Any]:
    """Constrói corpo de B2C. Aqui o iniciador vai em InitiatorName."""
    return {
        "InitiatorName": text_param(params, "initiatorName"),
        "SecurityCredential": text_param(params, "securityCredential"),
        "CommandID": validate_choice("commandId", params["commandId"], B2C_COMMAND_IDS),
        "Amount": format_decimal("amount", params["amount"]),
        "PartyA": text_param(params, "partyA"),
        "PartyB": text_param(params, "partyB"),
        "Remarks": text_param(params, "remarks"),
        "QueueTimeOutURL": text_param(params, "queueTimeOutUrl"),
        "ResultURL": text_param(params, "resultUrl"),
    }
