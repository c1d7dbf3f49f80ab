"""Rotas HTTP da API.

Responsabilidades:
- Definir endpoints HTTP (formulários, health)
- Validação inicial de request (método, content-type, site_id)
- Delegação para use_cases
- Respostas HTTP apropriadas

Estrutura:
- routes/forms/: recebimento de formulários por site
- routes/health/: health checks e readiness

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
