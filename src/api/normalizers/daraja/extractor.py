"""Decoders dos sete formatos de callback Daraja.

Cada decoder é uma função pura do envelope (mais o relógio injetado para
o fallback de timestamp) e devolve um NormalizedPayment completo.

Formatos:
- C2B confirmation: campos planos no topo do payload
- STK Push: Body.stkCallback + CallbackMetadata.Item[{Name, Value}]
- B2C, B2B, reversal, balance, transaction status:
  Result + ResultParameters.ResultParameter[{Key, Value}]
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from api.normalizers.daraja._folding import (
    as_amount,
    as_dict,
    as_result_code,
    as_text,
    dig,
    first_amount,
    first_text,
    fold_pairs,
    optional_text,
    resolve_timestamp,
)
from app.constants.daraja import TRANSACTION_STATUS_COMPLETED, PaymentStatus, TransactionType
from app.protocols.models import NormalizedPayment

if TYPE_CHECKING:
    from datetime import datetime

C2B_RESULT_DESCRIPTION = "Payment received"


def _status_from_code(result_code: int) -> PaymentStatus:
    return PaymentStatus.SUCCESS if result_code == 0 else PaymentStatus.FAILED


@dataclass(frozen=True, slots=True)
class _ResultContext:
    """Wrapper Result já dobrado, comum aos callbacks de resultado."""

    result: dict[str, Any]
    result_code: int
    params: dict[str, Any]

    @property
    def description(self) -> str:
        return as_text(self.result.get("ResultDesc"))


def _result_context(envelope: Any) -> _ResultContext:
    result = as_dict(dig(envelope, "Result"))
    return _ResultContext(
        result=result,
        result_code=as_result_code(result.get("ResultCode")),
        params=fold_pairs(dig(result, "ResultParameters", "ResultParameter"), "Key"),
    )


def decode_c2b_confirmation(envelope: Any, now: datetime | None = None) -> NormalizedPayment:
    """C2B confirmation: sempre sucesso (não há variante de falha)."""
    body = as_dict(envelope)
    return NormalizedPayment(
        transaction_id=as_text(body.get("TransID")),
        transaction_type=TransactionType.C2B,
        amount=as_amount(body.get("TransAmount")),
        status=PaymentStatus.SUCCESS,
        result_code=0,
        result_description=C2B_RESULT_DESCRIPTION,
        phone_number=optional_text(body.get("MSISDN")),
        account_reference=optional_text(body.get("BillRefNumber")),
        timestamp=resolve_timestamp(body.get("TransTime"), now, "c2b_timestamp"),
        raw_payload=envelope,
    )


def decode_stk_push(envelope: Any, now: datetime | None = None) -> NormalizedPayment:
    """STK Push: recibo M-Pesa com fallback para CheckoutRequestID."""
    callback = as_dict(dig(envelope, "Body", "stkCallback"))
    result_code = as_result_code(callback.get("ResultCode"))
    metadata = fold_pairs(dig(callback, "CallbackMetadata", "Item"), "Name")
    return NormalizedPayment(
        transaction_id=first_text(
            metadata.get("MpesaReceiptNumber"),
            callback.get("CheckoutRequestID"),
        ),
        transaction_type=TransactionType.STK_PUSH,
        amount=as_amount(metadata.get("Amount")),
        status=_status_from_code(result_code),
        result_code=result_code,
        result_description=as_text(callback.get("ResultDesc")),
        phone_number=optional_text(metadata.get("PhoneNumber")),
        timestamp=resolve_timestamp(metadata.get("TransactionDate"), now, "stkpush_timestamp"),
        raw_payload=envelope,
    )


def decode_b2c_result(envelope: Any, now: datetime | None = None) -> NormalizedPayment:
    ctx = _result_context(envelope)
    return NormalizedPayment(
        transaction_id=first_text(
            ctx.params.get("TransactionReceipt"),
            ctx.result.get("TransactionID"),
        ),
        transaction_type=TransactionType.B2C,
        amount=as_amount(ctx.params.get("TransactionAmount")),
        status=_status_from_code(ctx.result_code),
        result_code=ctx.result_code,
        result_description=ctx.description,
        phone_number=optional_text(ctx.params.get("ReceiverPartyPublicName")),
        timestamp=resolve_timestamp(None, now, "b2c_timestamp"),
        raw_payload=envelope,
    )


def decode_b2b_result(envelope: Any, now: datetime | None = None) -> NormalizedPayment:
    ctx = _result_context(envelope)
    return NormalizedPayment(
        transaction_id=first_text(
            ctx.params.get("TransactionReceipt"),
            ctx.result.get("TransactionID"),
        ),
        transaction_type=TransactionType.B2B,
        amount=first_amount(ctx.params.get("TransactionAmount"), ctx.params.get("Amount")),
        status=_status_from_code(ctx.result_code),
        result_code=ctx.result_code,
        result_description=ctx.description,
        account_reference=optional_text(ctx.params.get("DebitAccountBalance")),
        timestamp=resolve_timestamp(None, now, "b2b_timestamp"),
        raw_payload=envelope,
    )


def decode_reversal_result(envelope: Any, now: datetime | None = None) -> NormalizedPayment:
    """Estorno: o TransactionID do wrapper tem prioridade sobre o original."""
    ctx = _result_context(envelope)
    return NormalizedPayment(
        transaction_id=first_text(
            ctx.result.get("TransactionID"),
            ctx.params.get("OriginalTransactionID"),
        ),
        transaction_type=TransactionType.REVERSAL,
        amount=first_amount(ctx.params.get("Amount"), ctx.params.get("TransactionAmount")),
        status=_status_from_code(ctx.result_code),
        result_code=ctx.result_code,
        result_description=ctx.description,
        timestamp=resolve_timestamp(None, now, "reversal_timestamp"),
        raw_payload=envelope,
    )


def decode_balance_result(envelope: Any, now: datetime | None = None) -> NormalizedPayment:
    """Saldo: sem valor de transação; o saldo bruto vai em accountReference."""
    ctx = _result_context(envelope)
    return NormalizedPayment(
        transaction_id=first_text(
            ctx.result.get("ConversationID"),
            ctx.result.get("TransactionID"),
        ),
        transaction_type=TransactionType.BALANCE,
        amount=0.0,
        status=_status_from_code(ctx.result_code),
        result_code=ctx.result_code,
        result_description=ctx.description,
        account_reference=optional_text(ctx.params.get("AccountBalance")),
        timestamp=resolve_timestamp(None, now, "balance_timestamp"),
        raw_payload=envelope,
    )


def decode_transaction_status_result(
    envelope: Any, now: datetime | None = None
) -> NormalizedPayment:
    """Status de transação.

    Sucesso se TransactionStatus == "Completed" OU ResultCode == 0.
    """
    ctx = _result_context(envelope)
    completed = as_text(ctx.params.get("TransactionStatus")) == TRANSACTION_STATUS_COMPLETED
    status = PaymentStatus.SUCCESS if completed or ctx.result_code == 0 else PaymentStatus.FAILED
    return NormalizedPayment(
        transaction_id=first_text(
            ctx.params.get("ReceiptNo"),
            ctx.result.get("TransactionID"),
        ),
        transaction_type=TransactionType.TRANSACTION_STATUS,
        amount=as_amount(ctx.params.get("Amount")),
        status=status,
        result_code=ctx.result_code,
        result_description=first_text(ctx.description, ctx.params.get("TransactionReason")),
        phone_number=optional_text(
            ctx.params.get("DebitPartyPublicName"),
            ctx.params.get("CreditPartyPublicName"),
        ),
        timestamp=resolve_timestamp(
            ctx.params.get("FinalisedTime"), now, "transaction_status_timestamp"
        ),
        raw_payload=envelope,
    )
