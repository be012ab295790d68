"""Router principal da Daraja: callbacks inbound e operações outbound."""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.daraja.operations import router as operations_router
from api.routes.daraja.webhook import router as webhook_router

router = APIRouter()

# Callbacks (POST /webhook/mpesa/{event})
router.include_router(webhook_router, prefix="/webhook/mpesa")

# Lote outbound (POST /mpesa/operations/{resource}/{operation})
router.include_router(operations_router, prefix="/mpesa/operations")
