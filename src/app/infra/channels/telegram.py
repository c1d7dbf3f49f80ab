"""Canal de entrega via Telegram Bot API."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

from api.connectors.http_base import HttpError
from api.payload_builders.telegram import TelegramTextPayloadBuilder
from utils.errors import DeliveryError

from .base import ChallengeProtectedChannel

if TYPE_CHECKING:
    from app.protocols import BotApiClientProtocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TelegramChannel(ChallengeProtectedChannel):
    """Entrega o formulário como mensagem HTML em um chat do Telegram.

    Attributes:
        chat_id: Chat de destino
        bot_token: Token do bot
        client: Cliente da Bot API injetado
    """

    kind: ClassVar[str] = "telegram"

    chat_id: str
    bot_token: str = field(repr=False)
    client: BotApiClientProtocol = field(repr=False, compare=False)

    async def send(self, name: str, email: str, message: str) -> None:
        payload = TelegramTextPayloadBuilder(self.site_url).build(
            self.chat_id, name, email, message
        )
        try:
            await self.client.send_message(self.bot_token, payload)
        except (HttpError, ValueError) as exc:
            logger.warning("telegram_delivery_failed", extra={"error": str(exc)})
            raise DeliveryError(f"error doing request to Telegram servers: {exc}") from exc
