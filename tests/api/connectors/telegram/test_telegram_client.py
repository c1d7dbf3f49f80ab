"""Testes do cliente da Telegram Bot API."""

from __future__ import annotations

import json

import httpx
import pytest

from api.connectors.http_base import HttpClient, HttpClientConfig, HttpError
from api.connectors.telegram import TelegramBotClient
from api.connectors.telegram.client import parse_telegram_error


def _client(handler) -> TelegramBotClient:
    config = HttpClientConfig(transport=httpx.MockTransport(handler))
    return TelegramBotClient(http_client=HttpClient(config))


def test_method_url_embeds_token() -> None:
    client = TelegramBotClient(api_base_url="https://api.telegram.org/")
    assert client.method_url("123:ABC", "sendMessage") == (
        "https://api.telegram.org/bot123:ABC/sendMessage"
    )


def test_parse_telegram_error() -> None:
    assert parse_telegram_error({"ok": True, "result": {}}) is None
    error = parse_telegram_error({"ok": False, "error_code": 403, "description": "Forbidden"})
    assert error is not None
    assert error.error_code == 403
    assert error.description == "Forbidden"


@pytest.mark.asyncio
async def test_send_message_posts_payload() -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json={"ok": True, "result": {"message_id": 7}})

    payload = {"chat_id": "42", "text": "hi", "parse_mode": "HTML"}
    result = await _client(handler).send_message("tok", payload)

    assert result["result"]["message_id"] == 7
    assert requests[0].url.path == "/bottok/sendMessage"
    assert json.loads(requests[0].content) == payload


@pytest.mark.asyncio
async def test_send_message_rejects_empty_token() -> None:
    with pytest.raises(ValueError, match="bot_token"):
        await _client(lambda request: httpx.Response(200, json={"ok": True})).send_message(
            "  ", {"chat_id": "1", "text": "x"}
        )


@pytest.mark.asyncio
async def test_send_message_raises_on_ok_false() -> None:
    handler = lambda request: httpx.Response(  # noqa: E731
        200, json={"ok": False, "error_code": 400, "description": "chat not found"}
    )

    with pytest.raises(HttpError, match="chat not found"):
        await _client(handler).send_message("tok", {"chat_id": "1", "text": "x"})


@pytest.mark.asyncio
async def test_send_message_raises_on_http_status() -> None:
    handler = lambda request: httpx.Response(  # noqa: E731
        401, json={"ok": False, "error_code": 401, "description": "Unauthorized"}
    )

    with pytest.raises(HttpError) as exc_info:
        await _client(handler).send_message("tok", {"chat_id": "1", "text": "x"})

    assert exc_info.value.status_code == 401
