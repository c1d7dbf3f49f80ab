"""Contexto explícito do servidor compartilhado pelas requisições.

Agrupa o estado que as rotas precisam (registro de sites, coordenador de
shutdown e use case) em vez de variáveis globais de módulo. Fica em
`app.state.context` e pode ser construído isoladamente em testes.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from app.services.shutdown_coordinator import ShutdownCoordinator
from app.services.site_registry import SiteRegistry
from app.use_cases.forms import ProcessSubmissionUseCase


@dataclass(frozen=True)
class ServerContext:
    """Estado do servidor durante todo o ciclo de vida."""

    registry: SiteRegistry
    coordinator: ShutdownCoordinator = field(default_factory=ShutdownCoordinator)
    submission: ProcessSubmissionUseCase = field(default_factory=ProcessSubmissionUseCase)
