"""Connector Telegram: adapter de borda para a Bot API."""

from .client import TELEGRAM_API_BASE_URL, TelegramApiError, TelegramBotClient

__all__ = ["TELEGRAM_API_BASE_URL", "TelegramApiError", "TelegramBotClient"]
