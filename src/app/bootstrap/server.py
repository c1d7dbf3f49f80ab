"""Servidor uvicorn com drain gracioso.

O uvicorn, ao receber SIGINT/SIGTERM, para de aceitar conexões e encerra.
Aqui o sinal só inicia o drain: requisições novas recebem 503 enquanto as
já admitidas terminam; o listener fecha depois que o contador zera.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

import uvicorn

if TYPE_CHECKING:
    import socket
    from types import FrameType

    from app.services.shutdown_coordinator import ShutdownCoordinator

logger = logging.getLogger(__name__)


class DrainingServer(uvicorn.Server):
    """`uvicorn.Server` cujo handler de sinal drena antes de sair.

    Args:
        config: Config do uvicorn
        coordinator: Coordenador de shutdown compartilhado com as rotas
        drain_timeout_seconds: Limite de espera do drain (None = sem limite)
    """

    def __init__(
        self,
        config: uvicorn.Config,
        coordinator: ShutdownCoordinator,
        drain_timeout_seconds: float | None = None,
    ) -> None:
        super().__init__(config)
        self._coordinator = coordinator
        self._drain_timeout_seconds = drain_timeout_seconds
        self._loop: asyncio.AbstractEventLoop | None = None
        self._drain_task: asyncio.Task[None] | None = None
        self._signal_received = False

    async def serve(self, sockets: list[socket.socket] | None = None) -> None:
        self._loop = asyncio.get_running_loop()
        try:
            await super().serve(sockets=sockets)
        finally:
            self._coordinator.mark_stopped()

    def handle_exit(self, sig: int, frame: FrameType | None) -> None:
        # Não registra em _captured_signals: o uvicorn re-emitiria o sinal
        # ao sair e o processo terminaria com código de sinal.
        if self._signal_received:
            logger.info("shutdown_signal_ignored", extra={"signal": sig})
            return
        self._signal_received = True
        logger.info("shutdown_signal_received", extra={"signal": sig})

        if self._loop is None:
            self.should_exit = True
            return
        self._loop.call_soon_threadsafe(self._start_drain)

    def _start_drain(self) -> None:
        self._coordinator.begin_drain()
        self._drain_task = asyncio.get_running_loop().create_task(self._drain_then_exit())

    async def _drain_then_exit(self) -> None:
        drained = await self._coordinator.wait_drained(self._drain_timeout_seconds)
        logger.info(
            "shutdown_closing_listener",
            extra={"drained": drained, "in_flight": self._coordinator.in_flight},
        )
        self.should_exit = True
