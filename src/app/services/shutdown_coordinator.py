"""Coordenação de shutdown gracioso (drain de requisições em andamento).

Estados:
    RUNNING → DRAINING (sinal recebido; novas requisições recusadas)
            → DRAINED (contador de requisições em andamento chegou a zero)
            → STOPPED (listener fechado)

A checagem do flag de drain e o incremento do contador acontecem sob o
mesmo lock: uma requisição admitida sempre termina e decrementa, mesmo que
o drain comece logo depois.

Uso:
    if not coordinator.try_admit():
        return 503
    try:
        ...
    finally:
        coordinator.release()
"""

from __future__ import annotations

import asyncio
import logging
import threading
from enum import StrEnum

logger = logging.getLogger(__name__)


class ShutdownState(StrEnum):
    """Estados do ciclo de vida do servidor."""

    RUNNING = "running"
    DRAINING = "draining"
    DRAINED = "drained"
    STOPPED = "stopped"


class ShutdownCoordinator:
    """Conta requisições admitidas e bloqueia o fechamento até drenarem.

    Deve ser usado a partir do event loop do servidor; o lock protege o
    par (flag, contador) contra leituras de outras threads.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._state = ShutdownState.RUNNING
        self._in_flight = 0
        self._drained_event: asyncio.Event | None = None

    @property
    def state(self) -> ShutdownState:
        with self._lock:
            return self._state

    @property
    def in_flight(self) -> int:
        with self._lock:
            return self._in_flight

    @property
    def is_draining(self) -> bool:
        with self._lock:
            return self._state is not ShutdownState.RUNNING

    def try_admit(self) -> bool:
        """Registra a requisição como em andamento, se ainda aceitando.

        Returns:
            False se o drain já começou (requisição não foi contada)
        """
        with self._lock:
            if self._state is not ShutdownState.RUNNING:
                return False
            self._in_flight += 1
            return True

    def release(self) -> None:
        """Marca o fim de uma requisição admitida."""
        with self._lock:
            if self._in_flight <= 0:
                raise RuntimeError("release() called without a matching try_admit()")
            self._in_flight -= 1
            drained = self._state is ShutdownState.DRAINING and self._in_flight == 0
        if drained:
            self._signal_drained()

    def begin_drain(self) -> None:
        """Para de admitir requisições; idempotente."""
        with self._lock:
            if self._state is not ShutdownState.RUNNING:
                return
            self._state = ShutdownState.DRAINING
            pending = self._in_flight
        logger.info("shutdown_drain_started", extra={"in_flight": pending})
        if pending == 0:
            self._signal_drained()

    async def wait_drained(self, timeout_seconds: float | None = None) -> bool:
        """Aguarda o contador chegar a zero após begin_drain().

        Args:
            timeout_seconds: None espera indefinidamente; um valor limita a espera.

        Returns:
            True se drenou, False se o timeout expirou com requisições pendentes
        """
        with self._lock:
            if self._state is ShutdownState.RUNNING:
                raise RuntimeError("wait_drained() called before begin_drain()")
            if self._state is not ShutdownState.DRAINING:
                return True
            if self._drained_event is None:
                self._drained_event = asyncio.Event()
            event = self._drained_event

        try:
            await asyncio.wait_for(event.wait(), timeout=timeout_seconds)
        except TimeoutError:
            logger.warning(
                "shutdown_drain_timeout",
                extra={"in_flight": self.in_flight, "timeout_seconds": timeout_seconds},
            )
            return False
        return True

    def mark_stopped(self) -> None:
        """Registra que o listener foi fechado."""
        with self._lock:
            self._state = ShutdownState.STOPPED
        logger.info("shutdown_listener_closed")

    def _signal_drained(self) -> None:
        with self._lock:
            if self._state is ShutdownState.DRAINING:
                self._state = ShutdownState.DRAINED
            event = self._drained_event
        logger.info("shutdown_drained")
        if event is not None:
            event.set()
