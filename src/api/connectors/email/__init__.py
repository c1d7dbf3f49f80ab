"""Connector Email: envio SMTP autenticado.

Responsabilidades:
- Sessão SMTP com STARTTLS e AUTH PLAIN
- Erros de transporte convertidos em DeliveryError pelo canal
"""

from .smtp import SmtpCredentials, SmtpMailer, SmtpSendError

__all__ = ["SmtpCredentials", "SmtpMailer", "SmtpSendError"]
