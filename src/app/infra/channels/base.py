"""Base comum dos canais: verificação do desafio com o secret do site."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from app.protocols import ChallengeVerifierProtocol


@dataclass(frozen=True)
class ChallengeProtectedChannel(ABC):
    """Campos e verificação compartilhados por todas as variantes.

    Attributes:
        site_url: Rótulo do site (usado no assunto/cabeçalho da mensagem)
        recaptcha_secret: Secret reCAPTCHA exclusivo do site
        verifier: Verificador compartilhado (sem estado)
    """

    kind: ClassVar[str] = "base"

    site_url: str
    recaptcha_secret: str = field(repr=False)
    verifier: ChallengeVerifierProtocol = field(repr=False, compare=False)

    async def check_challenge(self, response: str) -> None:
        await self.verifier.verify(self.recaptcha_secret, response)

    @abstractmethod
    async def send(self, name: str, email: str, message: str) -> None:
        """Entrega o formulário já sanitizado pelo canal do site."""
