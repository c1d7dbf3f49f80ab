"""Testes para ProcessSubmissionUseCase."""

from __future__ import annotations

import json

import pytest

from app.use_cases.forms import (
    ProcessSubmissionUseCase,
    SubmissionErrorCode,
    SubmissionResult,
)
from utils.errors import ChallengeVerificationError, DeliveryError


class FakeChannel:
    """Canal fake que registra verificações e envios."""

    kind = "fake"

    def __init__(self, challenge_ok: bool = True, delivery_ok: bool = True) -> None:
        self._challenge_ok = challenge_ok
        self._delivery_ok = delivery_ok
        self.challenges: list[str] = []
        self.sent: list[tuple[str, str, str]] = []

    async def check_challenge(self, response: str) -> None:
        self.challenges.append(response)
        if not self._challenge_ok:
            raise ChallengeVerificationError("recaptcha verification failed", ["invalid-input-response"])

    async def send(self, name: str, email: str, message: str) -> None:
        if not self._delivery_ok:
            raise DeliveryError("smtp down")
        self.sent.append((name, email, message))


def _body(**fields: object) -> bytes:
    payload: dict[str, object] = {
        "name": "Ana",
        "mail": "ana@example.com",
        "msg": "Olá!",
        "g-recaptcha-response": "token-123",
    }
    payload.update(fields)
    return json.dumps(payload).encode("utf-8")


@pytest.fixture
def use_case() -> ProcessSubmissionUseCase:
    return ProcessSubmissionUseCase()


@pytest.mark.asyncio
async def test_happy_path_delivers_sanitized_fields(use_case: ProcessSubmissionUseCase) -> None:
    channel = FakeChannel()

    result = await use_case.execute(
        channel, _body(name="Ana\x00 Souza\n", msg="linha 1\r\nlinha 2\x07")
    )

    assert result == SubmissionResult(success=True)
    assert result.error_message is None
    assert channel.challenges == ["token-123"]
    assert channel.sent == [("Ana Souza", "ana@example.com", "linha 1\nlinha 2")]


@pytest.mark.parametrize(
    "raw_body",
    [b"", b"not json", b"[]", b"null", b'{"name": 1}', b'{"mail": "a@b.co"'],
)
@pytest.mark.asyncio
async def test_malformed_json(use_case: ProcessSubmissionUseCase, raw_body: bytes) -> None:
    channel = FakeChannel()

    result = await use_case.execute(channel, raw_body)

    assert result.error_code is SubmissionErrorCode.MALFORMED_JSON
    assert result.error_message == "malformed JSON"
    assert channel.challenges == []


@pytest.mark.asyncio
async def test_unknown_fields_are_ignored(use_case: ProcessSubmissionUseCase) -> None:
    channel = FakeChannel()

    result = await use_case.execute(channel, _body(extra="x", email="ignored"))

    assert result.success is True
    assert channel.sent[0][1] == "ana@example.com"


@pytest.mark.parametrize("address", ["", "not-an-email", "a@localhost"])
@pytest.mark.asyncio
async def test_invalid_email_skips_challenge(
    use_case: ProcessSubmissionUseCase, address: str
) -> None:
    channel = FakeChannel()

    result = await use_case.execute(channel, _body(mail=address))

    assert result.error_code is SubmissionErrorCode.INVALID_EMAIL
    assert result.error_message == "invalid email"
    assert channel.challenges == []
    assert channel.sent == []


@pytest.mark.asyncio
async def test_missing_email_is_invalid(use_case: ProcessSubmissionUseCase) -> None:
    result = await use_case.execute(FakeChannel(), b'{"name": "Ana", "msg": "oi"}')

    assert result.error_code is SubmissionErrorCode.INVALID_EMAIL


@pytest.mark.asyncio
async def test_challenge_failure_never_sends(use_case: ProcessSubmissionUseCase) -> None:
    channel = FakeChannel(challenge_ok=False)

    result = await use_case.execute(channel, _body())

    assert result.error_code is SubmissionErrorCode.CHALLENGE_FAILED
    assert result.error_message == "recaptcha verification failed"
    assert channel.sent == []


@pytest.mark.asyncio
async def test_delivery_failure(use_case: ProcessSubmissionUseCase) -> None:
    result = await use_case.execute(FakeChannel(delivery_ok=False), _body())

    assert result.success is False
    assert result.error_code is SubmissionErrorCode.DELIVERY_FAILED
    assert result.error_message == "error sending message"
