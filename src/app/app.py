"""Aplicação ASGI (FastAPI) do web-msg-handler.

A aplicação depende de um `ServerContext` já montado (sites carregados),
por isso não há instância de módulo; o entrypoint é `app.cli:main`.

Uso:
    web-msg-handler --config config.yaml --port 8080
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.routes import create_api_router
from api.routes.forms.cors import CORS_ALLOWED_HEADERS, CORS_ALLOWED_METHODS, FormCorsMiddleware
from app.constants.service import SERVICE_NAME, __version__
from config.logging import get_logger
from config.settings import ServerSettings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from app.context import ServerContext

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Loga início e fim do ciclo de vida da aplicação."""
    context: ServerContext = app.state.context
    logger.info(
        "app_starting",
        extra={"site_count": len(context.registry), "version": __version__},
    )
    yield
    logger.info(
        "app_shutting_down",
        extra={
            "state": str(context.coordinator.state),
            "in_flight": context.coordinator.in_flight,
        },
    )


def create_app(context: ServerContext, settings: ServerSettings | None = None) -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Args:
        context: Registro de sites, coordenador de shutdown e use case
        settings: Settings do processo (origens de CORS)

    Returns:
        Aplicação FastAPI configurada.
    """
    settings = settings or ServerSettings()
    fastapi_app = FastAPI(
        title=SERVICE_NAME,
        description="Recebe formulários de contato e entrega por email ou Telegram",
        version=__version__,
        lifespan=lifespan,
        # Qualquer path fora de /health e /ready é tratado como site_id
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    fastapi_app.state.context = context
    fastapi_app.state.cors_allowed_origins = settings.cors_allowed_origins

    # Preflight é respondido pela rota de formulários
    fastapi_app.add_middleware(
        FormCorsMiddleware,
        allow_origins=list(settings.cors_allowed_origins),
        allow_methods=list(CORS_ALLOWED_METHODS),
        allow_headers=list(CORS_ALLOWED_HEADERS),
    )

    fastapi_app.include_router(create_api_router())

    logger.info(
        "app_configured",
        extra={"cors_allowed_origins": list(settings.cors_allowed_origins)},
    )
    return fastapi_app
