"""Endpoints de callback da Daraja (M-Pesa).

Endpoints:
- POST /webhook/mpesa/{event}: recebimento de callbacks por tipo de evento

Fluxo:
1. O segmento {event} identifica o listener (EventKind); desconhecido = 404
2. O corpo é normalizado e filtrado conforme a política do listener
3. Dados emitidos seguem para o sink configurado

Resposta:
- Sempre 200 com {"ResultCode": 0, "ResultDesc": "Accepted"}, inclusive
  para JSON inválido; a Daraja reenvia callbacks não reconhecidos
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, Request, Response, status

from api.connectors.daraja.webhook.receive import InvalidJsonError, parse_callback_body
from app.constants.daraja import EventKind
from app.observability import (
    CORRELATION_ID_HEADER,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from app.protocols.models import CallbackPolicy
from app.use_cases.daraja import acknowledge, process_callback
from config.settings import get_daraja_settings

if TYPE_CHECKING:
    from app.protocols.callback_sink import CallbackSinkProtocol

logger = logging.getLogger(__name__)

router = APIRouter()

# Lazy-loaded sink (inicializado na primeira requisição)
_callback_sink: CallbackSinkProtocol | None = None


def _get_callback_sink() -> CallbackSinkProtocol:
    """Obtém o sink de eventos emitidos (lazy-loading)."""
    global _callback_sink
    if _callback_sink is None:
        from app.bootstrap import create_callback_sink

        _callback_sink = create_callback_sink()
    return _callback_sink


def _resolve_event_kind(event: str) -> EventKind | None:
    try:
        return EventKind(event)
    except ValueError:
        return None


def _listener_policy(event_kind: EventKind) -> CallbackPolicy:
    """Política do listener: override por tipo de evento ou default global."""
    settings = get_daraja_settings()
    return CallbackPolicy(
        success_only=settings.success_only_for(event_kind.value),
        normalize_output=settings.normalize_output_for(event_kind.value),
    )


@router.post("/{event}", response_model=None)
async def receive_callback(event: str, request: Request) -> Response | dict[str, Any]:
    """Recebe um callback Daraja do tipo configurado em {event}.

    Returns:
        Reconhecimento fixo da Daraja ou 404 para listener inexistente.
    """
    correlation_id = request.headers.get(CORRELATION_ID_HEADER)
    token = set_correlation_id(correlation_id)

    try:
        event_kind = _resolve_event_kind(event)
        if event_kind is None:
            logger.warning(
                "daraja_listener_not_configured",
                extra={
                    "channel": "mpesa",
                    "correlation_id": get_correlation_id(),
                    "event": event,
                },
            )
            return Response(
                content="Not Found",
                media_type="text/plain",
                status_code=status.HTTP_404_NOT_FOUND,
            )

        raw_body = await request.body()

        try:
            envelope = parse_callback_body(raw_body)
        except InvalidJsonError as exc:
            logger.warning(
                "daraja_callback_json_invalid",
                extra={
                    "channel": "mpesa",
                    "correlation_id": get_correlation_id(),
                    "event_kind": event_kind.value,
                    "error": str(exc),
                },
            )
            return acknowledge().as_dict()

        logger.info(
            "daraja_callback_received",
            extra={
                "channel": "mpesa",
                "correlation_id": get_correlation_id(),
                "event_kind": event_kind.value,
                "payload_size": len(raw_body),
            },
        )

        result = process_callback(event_kind, envelope, policy=_listener_policy(event_kind))
        if result.emission.emitted:
            try:
                await _get_callback_sink().publish(event_kind, result.emission.data)
            except Exception:
                # O ack independe da entrega downstream
                logger.exception(
                    "daraja_callback_emit_failed",
                    extra={
                        "channel": "mpesa",
                        "correlation_id": get_correlation_id(),
                        "event_kind": event_kind.value,
                    },
                )

        return result.acknowledgement.as_dict()

    finally:
        reset_correlation_id(token)
