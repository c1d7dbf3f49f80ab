"""Protocolos de transporte usados pelos canais de entrega.

Evita dependência direta dos canais em clientes concretos.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from email.message import EmailMessage

    from api.connectors.email import SmtpCredentials


class MailTransportProtocol(Protocol):
    """Contrato mínimo para envio SMTP."""

    async def send(
        self,
        *,
        host: str,
        port: int,
        credentials: SmtpCredentials,
        recipient: str,
        message: EmailMessage,
    ) -> None: ...


class BotApiClientProtocol(Protocol):
    """Contrato mínimo para o cliente da Bot API."""

    async def send_message(self, bot_token: str, payload: dict[str, Any]) -> dict[str, Any]: ...
