"""Enums de domínio e constantes do protocolo Daraja (M-Pesa)."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class Resource(StrEnum):
    """Recursos expostos pela API Daraja."""

    STK_PUSH = "stkPush"
    C2B = "c2b"
    B2C = "b2c"
    B2B = "b2b"
    ACCOUNT = "account"
    IDENTITY = "identity"
    PULL = "pull"


class Operation(StrEnum):
    """Operações disponíveis por recurso."""

    INITIATE = "initiate"
    QUERY_STATUS = "queryStatus"
    REGISTER_URL = "registerUrl"
    SIMULATE = "simulate"
    PAYMENT_REQUEST = "paymentRequest"
    CHECK_ATI = "checkAti"
    QUERY = "query"
    BALANCE = "balance"
    TRANSACTION_STATUS = "transactionStatus"
    REVERSAL = "reversal"


class EventKind(StrEnum):
    """Tipos de callback configuráveis por listener.

    O tipo é definido na configuração do listener (segmento do path do
    webhook) e nunca inferido do payload.
    """

    PAYMENT_RECEIVED = "payment.received"
    STK_PUSH_COMPLETED = "stkpush.completed"
    B2C_COMPLETED = "b2c.completed"
    B2B_COMPLETED = "b2b.completed"
    REVERSAL_COMPLETED = "reversal.completed"
    BALANCE_COMPLETED = "balance.completed"
    TRANSACTION_STATUS_COMPLETED = "transaction.status.completed"


class TransactionType(StrEnum):
    """Tipo canônico de transação no registro normalizado."""

    C2B = "c2b"
    STK_PUSH = "stkpush"
    B2C = "b2c"
    B2B = "b2b"
    REVERSAL = "reversal"
    BALANCE = "balance"
    TRANSACTION_STATUS = "transactionStatus"


class PaymentStatus(StrEnum):
    """Status canônico do pagamento."""

    SUCCESS = "success"
    FAILED = "failed"


class IdentifierType(IntEnum):
    """Tipos de identificador de contraparte usados pela Daraja."""

    MSISDN = 1
    TILL_NUMBER = 2
    SHORTCODE = 4
    REVERSAL_ORGANIZATION = 11


class ResponseType(StrEnum):
    """Ação padrão quando a URL de validação C2B não responde."""

    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


# CommandIDs aceitos por operação
STK_TRANSACTION_TYPES = frozenset({"CustomerPayBillOnline", "CustomerBuyGoodsOnline"})
C2B_COMMAND_IDS = frozenset({"CustomerPayBillOnline", "CustomerBuyGoodsOnline"})
B2C_COMMAND_IDS = frozenset({"SalaryPayment", "BusinessPayment", "PromotionPayment"})
B2B_COMMAND_IDS = frozenset(
    {
        "BusinessPayBill",
        "BusinessBuyGoods",
        "DisburseFundsToBusiness",
        "BusinessToBusinessTransfer",
        "BusinessTransferFromMMToUtility",
    }
)

# Constantes fixas do protocolo
HTTP_METHOD = "POST"
C2B_SIMULATE_BILL_REF = "Simulate"
CHECK_ATI_COMMAND_ID = "CheckATI"
ACCOUNT_BALANCE_COMMAND_ID = "AccountBalance"
TRANSACTION_STATUS_COMMAND_ID = "TransactionStatusQuery"
REVERSAL_COMMAND_ID = "TransactionReversal"
DEFAULT_STK_TRANSACTION_TYPE = "CustomerPayBillOnline"
DEFAULT_PULL_REQUEST_TYPE = "Pull"

# Resultado "Completed" no parâmetro TransactionStatus do callback de status
TRANSACTION_STATUS_COMPLETED = "Completed"

# Resposta de reconhecimento exigida pela Daraja em todo callback
ACK_RESULT_CODE = 0
ACK_RESULT_DESC = "Accepted"
