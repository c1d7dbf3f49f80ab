"""Cliente da Telegram Bot API (método sendMessage).

Segurança:
- O bot token faz parte da URL; nunca logar a URL nem o token
- Logging apenas de metadados (status, chat presente, tamanho do texto)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from api.connectors.http_base import HttpClient, HttpError

logger = logging.getLogger(__name__)

TELEGRAM_API_BASE_URL = "https://api.telegram.org"
SEND_MESSAGE_METHOD = "sendMessage"


@dataclass(frozen=True)
class TelegramApiError:
    """Erro retornado pela Bot API em respostas com ok=false."""

    error_code: int
    description: str


def parse_telegram_error(response_data: dict[str, Any]) -> TelegramApiError | None:
    """Extrai erro da resposta da Bot API.

    Args:
        response_data: Dict do response JSON

    Returns:
        TelegramApiError se "ok" não for verdadeiro, None se sucesso
    """
    if response_data.get("ok"):
        return None
    return TelegramApiError(
        error_code=int(response_data.get("error_code") or 0),
        description=str(response_data.get("description") or "unknown error"),
    )


class TelegramBotClient:
    """Cliente HTTP mínimo para a Bot API."""

    def __init__(
        self,
        http_client: HttpClient | None = None,
        api_base_url: str = TELEGRAM_API_BASE_URL,
    ) -> None:
        self._http = http_client or HttpClient()
        self._api_base_url = api_base_url.rstrip("/")

    def method_url(self, bot_token: str, method: str) -> str:
        return f"{self._api_base_url}/bot{bot_token}/{method}"

    async def send_message(self, bot_token: str, payload: dict[str, Any]) -> dict[str, Any]:
        """Envia mensagem via sendMessage.

        Args:
            bot_token: Token do bot (obtido via @BotFather)
            payload: Payload JSON (chat_id, text, parse_mode, ...)

        Returns:
            Response JSON da Bot API

        Raises:
            ValueError: Se bot_token está vazio
            HttpError: Se erro HTTP, transporte ou ok=false
        """
        if not bot_token or not bot_token.strip():
            raise ValueError("bot_token é obrigatório para sendMessage")

        url = self.method_url(bot_token, SEND_MESSAGE_METHOD)
        response_data = await self._http.post_json(url, json=payload)

        api_error = parse_telegram_error(response_data)
        if api_error is not None:
            logger.warning(
                "telegram_api_error",
                extra={
                    "error_code": api_error.error_code,
                    "description": api_error.description,
                },
            )
            raise HttpError(
                f"Telegram API error: {api_error.description} ({api_error.error_code})",
                status_code=api_error.error_code or None,
            )

        logger.debug("telegram_message_sent", extra={"text_length": len(payload.get("text", ""))})
        return response_data
