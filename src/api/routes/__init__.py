"""Rotas HTTP da API: adapters de entrada.

Responsabilidades:
- Definir endpoints HTTP (callbacks Daraja, health)
- Validação inicial de request (path, corpo JSON)
- Delegação para connectors/use_cases
- Respostas HTTP apropriadas

Estrutura:
- routes/daraja/: callbacks e operações M-Pesa
- routes/health/: liveness probe

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
