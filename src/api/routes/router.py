"""Agregador de rotas: registra todos os routers do serviço.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.daraja.router import router as daraja_router
from api.routes.health.router import router as health_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados.

    Returns:
        APIRouter configurado com todos os endpoints.
    """
    api_router = APIRouter()

    # Health checks (sem prefixo para /health na raiz)
    api_router.include_router(health_router, tags=["health"])

    # M-Pesa (callbacks e operações)
    api_router.include_router(daraja_router, tags=["mpesa"])

    return api_router
