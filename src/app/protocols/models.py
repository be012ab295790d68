"""Contratos canônicos do adapter Daraja.

Modelos trocados entre encoder, normalizer, use cases e rotas.
Nenhum modelo aqui faz IO.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.constants.daraja import (
    ACK_RESULT_CODE,
    ACK_RESULT_DESC,
    HTTP_METHOD,
    PaymentStatus,
    TransactionType,
)


@dataclass(frozen=True, slots=True)
class RequestDescriptor:
    """Requisição outbound pronta para o transporte.

    Attributes:
        path: Path do endpoint Daraja (ex: /mpesa/stkpush/v1/processrequest)
        body: Corpo JSON com nomes de campo do fornecedor
        method: Sempre POST neste protocolo
    """

    path: str
    body: dict[str, Any]
    method: str = HTTP_METHOD


class NormalizedPayment(BaseModel):
    """Registro canônico de um callback Daraja.

    Todo campo obrigatório sempre tem valor: dado ausente na origem vira
    default (string vazia, 0 ou relógio atual), nunca erro.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    transaction_id: str = ""
    transaction_type: TransactionType
    amount: float = 0.0
    status: PaymentStatus
    result_code: int = 0
    result_description: str = ""
    phone_number: str | None = None
    account_reference: str | None = None
    timestamp: str
    raw_payload: Any = Field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        return self.status == PaymentStatus.SUCCESS

    def to_payload(self) -> dict[str, Any]:
        """Serializa com chaves camelCase, omitindo opcionais ausentes.

        rawPayload é anexado como recebido, sem passar pelo serializer.
        """
        payload = self.model_dump(
            mode="json",
            by_alias=True,
            exclude_none=True,
            exclude={"raw_payload"},
        )
        payload["rawPayload"] = self.raw_payload
        return payload


@dataclass(frozen=True, slots=True)
class CallbackPolicy:
    """Política de emissão configurada por listener.

    Attributes:
        success_only: Suprime emissão de registros com status failed
        normalize_output: Emite o registro normalizado (False = envelope bruto)
    """

    success_only: bool = True
    normalize_output: bool = True


@dataclass(frozen=True, slots=True)
class CallbackAcknowledgement:
    """Resposta de transporte devolvida à Daraja em todo callback."""

    result_code: int = ACK_RESULT_CODE
    result_desc: str = ACK_RESULT_DESC

    def as_dict(self) -> dict[str, Any]:
        return {"ResultCode": self.result_code, "ResultDesc": self.result_desc}


@dataclass(frozen=True, slots=True)
class CallbackEmission:
    """Evento de domínio emitido (ou suprimido) para o downstream."""

    emitted: bool
    data: Any = None
    record: NormalizedPayment | None = None


@dataclass(frozen=True, slots=True)
class CallbackResult:
    """Os dois canais independentes de um callback: ack e emissão."""

    acknowledgement: CallbackAcknowledgement
    emission: CallbackEmission


@dataclass(slots=True)
class OperationResult:
    """Resultado de um item do lote outbound."""

    index: int
    data: dict[str, Any] = field(default_factory=dict)
    error: str | None = None

    @property
    def success(self) -> bool:
        return self.error is None

    def as_dict(self) -> dict[str, Any]:
        if self.error is not None:
            return {"error": self.error}
        return self.data
