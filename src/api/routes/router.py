"""Agregador de rotas.

Cria o router principal da API. A ordem importa: /health e /ready
precisam ser registrados antes da rota catch-all de formulários.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.forms.router import router as forms_router
from api.routes.health.router import router as health_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados.

    Returns:
        APIRouter configurado com todos os endpoints.
    """
    api_router = APIRouter()

    # Health checks (sem prefixo para /health e /ready na raiz)
    api_router.include_router(health_router, tags=["health"])

    # Formulários: /{site_id} para qualquer método
    api_router.include_router(forms_router, tags=["forms"])

    return api_router
