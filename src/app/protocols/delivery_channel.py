"""Protocolos dos canais de entrega de formulários.

Um canal sabe (a) verificar o desafio anti-automação com o secret do
próprio site e (b) entregar a mensagem pelo seu transporte. Adicionar um
canal novo é implementar este contrato; o roteador não muda.
"""

from __future__ import annotations

from typing import Protocol


class ChallengeVerifierProtocol(Protocol):
    """Contrato mínimo para verificar tokens anti-automação."""

    async def verify(self, secret: str, response: str) -> None: ...


class DeliveryChannelProtocol(Protocol):
    """Contrato de um canal de entrega associado a um site."""

    @property
    def kind(self) -> str: ...

    async def check_challenge(self, response: str) -> None:
        """Levanta ChallengeVerificationError se o token não passar."""
        ...

    async def send(self, name: str, email: str, message: str) -> None:
        """Levanta DeliveryError se a entrega falhar."""
        ...
