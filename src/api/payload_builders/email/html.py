"""Builder da mensagem HTML enviada por email."""

from __future__ import annotations

import html
from email.message import EmailMessage


def lf_to_br(text: str) -> str:
    """Troca quebras de linha por <br>, descartando "\\r" antes."""
    return text.replace("\r", "").replace("\n", "<br>")


def build_html_body(name: str, email: str, message: str) -> str:
    """Constrói o documento HTML com os campos escapados.

    Args:
        name: Nome já sanitizado
        email: Endereço já validado
        message: Mensagem já sanitizada

    Returns:
        Documento HTML de linha única
    """
    return (
        "<html><body>"
        f"<b>Name</b>: {html.escape(name)}<br>"
        f"<b>Email</b>: {html.escape(email)}<br>"
        f"<b>Message</b>: {lf_to_br(html.escape(message))}"
        "</body></html>"
    )


def build_mail_message(
    *,
    site_url: str,
    sender: str,
    recipient: str,
    name: str,
    email: str,
    message: str,
) -> EmailMessage:
    """Monta o EmailMessage (text/html) para o destinatário do site."""
    mail = EmailMessage()
    mail["From"] = sender
    mail["To"] = recipient
    mail["Subject"] = f"Message from {site_url}"
    mail.set_content(build_html_body(name, email, message), subtype="html", charset="utf-8")
    return mail
