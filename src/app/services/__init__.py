"""Serviços de aplicação (estado compartilhado entre requisições)."""

from app.services.shutdown_coordinator import ShutdownCoordinator, ShutdownState
from app.services.site_registry import MAX_SITE_ID, SiteRegistry

__all__ = [
    "MAX_SITE_ID",
    "ShutdownCoordinator",
    "ShutdownState",
    "SiteRegistry",
]
