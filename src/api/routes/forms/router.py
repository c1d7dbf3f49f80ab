"""Router de formulários: agrega os endpoints de envio."""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.forms.submit import router as submit_router

router = APIRouter()

# POST /{site_id}; demais métodos respondem 405 pela própria rota
router.include_router(submit_router)
