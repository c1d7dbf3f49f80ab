"""Endpoints de health check (liveness e readiness)."""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.constants.service import SERVICE_NAME, __version__

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = __version__


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe: verifica se o processo está respondendo."""
    return HealthResponse(
        status="healthy",
        service=SERVICE_NAME,
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check(request: Request) -> JSONResponse:
    """Readiness probe: 503 quando o servidor está drenando."""
    context = getattr(request.app.state, "context", None)
    if context is None:
        return JSONResponse(
            content={"status": "not_ready", "error": "not_configured"},
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        )

    coordinator = context.coordinator
    ready = not coordinator.is_draining
    payload = {
        "status": "ready" if ready else "not_ready",
        "sites": len(context.registry),
        "in_flight": coordinator.in_flight,
        "state": str(coordinator.state),
        "timestamp": datetime.now(UTC).isoformat(),
    }
    if not ready:
        logger.info("readiness_draining", extra={"in_flight": coordinator.in_flight})
    return JSONResponse(
        content=payload,
        status_code=status.HTTP_200_OK if ready else status.HTTP_503_SERVICE_UNAVAILABLE,
    )
