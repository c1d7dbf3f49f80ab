"""Payload builders para Email (SMTP).

Responsabilidades:
- Montar a mensagem HTML do formulário (headers + corpo escapado)
"""

from api.payload_builders.email.html import build_html_body, build_mail_message, lf_to_br

__all__ = ["build_html_body", "build_mail_message", "lf_to_br"]
