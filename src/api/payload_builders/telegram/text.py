"""Builder para mensagens de texto do sendMessage."""

from __future__ import annotations

import html
from typing import Any

PARSE_MODE_HTML = "HTML"


class TelegramTextPayloadBuilder:
    """Builder do texto HTML do formulário e do payload sendMessage.

    O Telegram renderiza "\\n" nativamente, então não há troca por <br>.
    """

    def __init__(self, site_url: str) -> None:
        self._site_url = site_url

    def build_text(self, name: str, email: str, message: str) -> str:
        return (
            f"Message from {self._site_url}\n"
            "\n"
            f"<b>Name</b>: {html.escape(name)}\n"
            f"<b>Email</b>: {html.escape(email)}\n"
            f"<b>Message</b>: {html.escape(message)}"
        )

    def build(self, chat_id: str, name: str, email: str, message: str) -> dict[str, Any]:
        """Constrói payload para sendMessage.

        Args:
            chat_id: Chat de destino
            name: Nome já sanitizado
            email: Endereço já validado
            message: Mensagem já sanitizada

        Returns:
            Payload conforme Bot API, sem preview de links
        """
        return {
            "chat_id": chat_id,
            "text": self.build_text(name, email, message),
            "parse_mode": PARSE_MODE_HTML,
            "disable_web_page_preview": True,
        }
