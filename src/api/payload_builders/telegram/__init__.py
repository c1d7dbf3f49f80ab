"""Payload builders para Telegram Bot API."""

from api.payload_builders.telegram.text import PARSE_MODE_HTML, TelegramTextPayloadBuilder

__all__ = ["PARSE_MODE_HTML", "TelegramTextPayloadBuilder"]
