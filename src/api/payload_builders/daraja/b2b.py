"""Builder de B2B (pagamento entre empresas)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.payload_builders.daraja.base import text_param
from api.validators.daraja.params import (
    format_decimal,
    validate_choice,
    validate_identifier_type,
)
from app.constants.daraja import B2B_COMMAND_IDS, IdentifierType

if TYPE_CHECKING:
    from collections.abc import Mapping


def build_payment_request_body(params: Mapping[str, Any], timestamp: str) -> dict[str, Any]:
    """Constrói corpo de B2B.

    B2B exige tipo de identificador para remetente e destinatário;
    ambos são shortcode (4).
    """
    return {
        "Initiator": text_param(params, "initiatorName"),
        "SecurityCredential": text_param(params, "securityCredential"),
        "CommandID": validate_choice("commandId", params["commandId"], B2B_COMMAND_IDS),
        "Amount": format_decimal("amount", params["amount"]),
        "PartyA": text_param(params, "partyA"),
        "PartyB": text_param(params, "partyB"),
        "Remarks": text_param(params, "remarks"),
        "QueueTimeOutURL": text_param(params, "queueTimeOutUrl"),
        "ResultURL": text_param(params, "resultUrl"),
        "AccountReference": text_param(params, "accountReference"),
        "SenderIdentifierType": validate_identifier_type(
            "senderIdentifierType",
            params.get("senderIdentifierType", IdentifierType.SHORTCODE),
        ),
        "ReceiverIdentifierType": validate_identifier_type(
            "receiverIdentifierType",
            params.get("receiverIdentifierType", IdentifierType.SHORTCODE),
        ),
    }
