"""Canal de entrega por email (SMTP autenticado)."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

from api.connectors.email import SmtpCredentials, SmtpSendError
from api.payload_builders.email import build_mail_message
from utils.errors import DeliveryError

from .base import ChallengeProtectedChannel

if TYPE_CHECKING:
    from app.protocols import MailTransportProtocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MailChannel(ChallengeProtectedChannel):
    """Entrega o formulário como email HTML para um único destinatário.

    Attributes:
        recipient: Endereço que recebe os formulários (mailto)
        username: Conta SMTP, também usada como remetente
        password: Senha SMTP
        hostname: Host SMTP
        port: Porta SMTP
        transport: Cliente SMTP injetado
    """

    kind: ClassVar[str] = "mail"

    recipient: str
    username: str
    password: str = field(repr=False)
    hostname: str
    port: int
    transport: MailTransportProtocol = field(repr=False, compare=False)

    async def send(self, name: str, email: str, message: str) -> None:
        mail = build_mail_message(
            site_url=self.site_url,
            sender=self.username,
            recipient=self.recipient,
            name=name,
            email=email,
            message=message,
        )
        try:
            await self.transport.send(
                host=self.hostname,
                port=self.port,
                credentials=SmtpCredentials(self.username, self.password),
                recipient=self.recipient,
                message=mail,
            )
        except SmtpSendError as exc:
            logger.warning(
                "mail_delivery_failed",
                extra={"smtp_host": self.hostname, "error": str(exc)},
            )
            raise DeliveryError(str(exc)) from exc
