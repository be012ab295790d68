"""Protocolos e contratos do core da aplicação."""

from .callback_sink import CallbackSinkProtocol
from .http_client import DarajaHttpClientProtocol
from .models import (
    CallbackAcknowledgement,
    CallbackEmission,
    CallbackPolicy,
    CallbackResult,
    NormalizedPayment,
    OperationResult,
    RequestDescriptor,
)
from .payload_builder import BodyBuilder
from .validator import ValidationError

__all__ = [
    "BodyBuilder",
    "CallbackAcknowledgement",
    "CallbackEmission",
    "CallbackPolicy",
    "CallbackResult",
    "CallbackSinkProtocol",
    "DarajaHttpClientProtocol",
    "NormalizedPayment",
    "OperationResult",
    "RequestDescriptor",
    "ValidationError",
]
