"""Envio de email via SMTP autenticado (AUTH PLAIN) com aiosmtplib.

Regras da sessão:
- EHLO, STARTTLS quando o servidor anuncia, EHLO de novo
- AUTH PLAIN apenas em conexão cifrada ou com o host local
- Um único envio por chamada, sem retry
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import aiosmtplib

from api.connectors.http_base import DEFAULT_TIMEOUT_SECONDS

if TYPE_CHECKING:
    from email.message import EmailMessage

logger = logging.getLogger(__name__)

_LOCAL_HOSTS = frozenset({"localhost", "127.0.0.1", "::1"})


class SmtpSendError(Exception):
    """Falha na sessão SMTP (conexão, TLS, autenticação ou envio)."""


@dataclass(frozen=True)
class SmtpCredentials:
    """Credenciais da conta SMTP usada como remetente."""

    username: str
    password: str = field(repr=False)


class SmtpMailer:
    """Envia mensagens prontas por uma sessão SMTP curta."""

    def __init__(self, timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS) -> None:
        self._timeout_seconds = timeout_seconds

    async def send(
        self,
        *,
        host: str,
        port: int,
        credentials: SmtpCredentials,
        recipient: str,
        message: EmailMessage,
    ) -> None:
        """Envia `message` para `recipient`.

        Raises:
            SmtpSendError: Em qualquer falha de transporte ou autenticação
        """
        smtp = aiosmtplib.SMTP(
            hostname=host,
            port=port,
            timeout=self._timeout_seconds,
            start_tls=False,
        )
        try:
            async with smtp:
                await smtp.ehlo()
                encrypted = False
                if smtp.supports_extension("starttls"):
                    await smtp.starttls()
                    await smtp.ehlo()
                    encrypted = True
                await _authenticate(smtp, host, credentials, encrypted=encrypted)
                await smtp.send_message(
                    message,
                    sender=credentials.username,
                    recipients=[recipient],
                )
        except (aiosmtplib.SMTPException, OSError) as exc:
            raise SmtpSendError(f"error sending mail: {exc}") from exc

        logger.debug("smtp_message_sent", extra={"smtp_host": host, "smtp_port": port})


async def _authenticate(
    smtp: aiosmtplib.SMTP,
    host: str,
    credentials: SmtpCredentials,
    *,
    encrypted: bool,
) -> None:
    if not smtp.supports_extension("auth"):
        raise SmtpSendError("smtp server doesn't support AUTH")
    if not encrypted and host not in _LOCAL_HOSTS:
        raise SmtpSendError("refusing to send credentials over unencrypted connection")
    await smtp.auth_plain(credentials.username, credentials.password)
