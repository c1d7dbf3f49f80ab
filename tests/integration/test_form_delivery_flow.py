"""Fluxo completo: YAML de sites → contexto → HTTP → reCAPTCHA → entrega.

Rede externa simulada: httpx.MockTransport (reCAPTCHA e Bot API) e um
cliente aiosmtplib fake.
"""

from __future__ import annotations

import json
from email.message import EmailMessage

import aiosmtplib
import httpx
import pytest

from api.connectors.http_base import HttpClientConfig
from app.app import create_app
from app.bootstrap import build_server_context
from config.settings import parse_sites_config

SITES = {
    "sites": [
        {
            "id": 42,
            "url": "example.com",
            "recaptcha_secret": "mail-secret",
            "sender": {
                "type": "mail",
                "mailto": "inbox@example.com",
                "username": "no-reply@example.com",
                "password": "pw",
                "hostname": "smtp.example.com",
                "port": 587,
            },
        },
        {
            "id": 7,
            "url": "other.example.org",
            "recaptcha_secret": "tg-secret",
            "sender": {"type": "telegram", "chat_id": "-1001", "bot_token": "123:ABC"},
        },
    ]
}

FORM = {
    "name": "Ana <Souza>",
    "mail": "ana@example.com",
    "msg": "linha 1\r\nlinha 2",
    "g-recaptcha-response": "good-token",
}


class ExternalServices:
    """Simula Google siteverify e Telegram Bot API."""

    def __init__(self) -> None:
        self.verifications: list[dict[str, str]] = []
        self.telegram_messages: list[dict[str, object]] = []
        self.telegram_paths: list[str] = []

    def handle(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        if request.url.host == "www.google.com":
            self.verifications.append(body)
            if body["response"] == "good-token":
                return httpx.Response(200, json={"success": True})
            return httpx.Response(
                200, json={"success": False, "error-codes": ["invalid-input-response"]}
            )
        self.telegram_paths.append(request.url.path)
        self.telegram_messages.append(body)
        return httpx.Response(200, json={"ok": True, "result": {"message_id": 1}})


class FakeSMTP:
    sent: list[EmailMessage] = []

    def __init__(self, **options: object) -> None:
        self.options = options

    async def __aenter__(self) -> FakeSMTP:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        return None

    async def ehlo(self) -> None:
        return None

    def supports_extension(self, name: str) -> bool:
        return name in {"starttls", "auth"}

    async def starttls(self) -> None:
        return None

    async def auth_plain(self, username: str, password: str) -> None:
        return None

    async def send_message(
        self, message: EmailMessage, sender: str, recipients: list[str]
    ) -> None:
        FakeSMTP.sent.append(message)


@pytest.fixture
def services(monkeypatch: pytest.MonkeyPatch) -> ExternalServices:
    FakeSMTP.sent = []
    monkeypatch.setattr(aiosmtplib, "SMTP", FakeSMTP)
    return ExternalServices()


@pytest.fixture
def client(services: ExternalServices) -> httpx.AsyncClient:
    context = build_server_context(
        parse_sites_config(SITES),
        http_config=HttpClientConfig(transport=httpx.MockTransport(services.handle)),
    )
    return httpx.AsyncClient(
        transport=httpx.ASGITransport(app=create_app(context)),
        base_url="http://testserver",
    )


async def _post(client: httpx.AsyncClient, path: str, form: dict[str, str]) -> httpx.Response:
    return await client.post(
        path, content=json.dumps(form), headers={"Content-Type": "application/json"}
    )


@pytest.mark.asyncio
async def test_mail_site_delivers_escaped_html(
    client: httpx.AsyncClient, services: ExternalServices
) -> None:
    async with client:
        response = await _post(client, "/42", FORM)

    assert response.status_code == 200
    assert response.json() == {"success": True}
    assert services.verifications == [{"secret": "mail-secret", "response": "good-token"}]
    message = FakeSMTP.sent[0]
    assert message["Subject"] == "Message from example.com"
    assert message["To"] == "inbox@example.com"
    assert "Ana &lt;Souza&gt;" in message.get_content()
    assert "linha 1<br>linha 2" in message.get_content()


@pytest.mark.asyncio
async def test_telegram_site_delivers_message(
    client: httpx.AsyncClient, services: ExternalServices
) -> None:
    async with client:
        response = await _post(client, "/7", FORM)

    assert response.status_code == 200
    assert services.verifications[0]["secret"] == "tg-secret"
    assert services.telegram_paths == ["/bot123:ABC/sendMessage"]
    sent = services.telegram_messages[0]
    assert sent["chat_id"] == "-1001"
    assert sent["text"] == (
        "Message from other.example.org\n\n"
        "<b>Name</b>: Ana &lt;Souza&gt;\n"
        "<b>Email</b>: ana@example.com\n"
        "<b>Message</b>: linha 1\nlinha 2"
    )
    assert FakeSMTP.sent == []


@pytest.mark.asyncio
async def test_rejected_challenge_never_delivers(
    client: httpx.AsyncClient, services: ExternalServices
) -> None:
    async with client:
        response = await _post(client, "/7", {**FORM, "g-recaptcha-response": "bot"})

    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "recaptcha verification failed"}
    assert services.telegram_messages == []
    assert FakeSMTP.sent == []
