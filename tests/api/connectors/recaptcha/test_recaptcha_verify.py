"""Testes do verificador reCAPTCHA."""

from __future__ import annotations

import json

import httpx
import pytest

from api.connectors.http_base import HttpClient, HttpClientConfig
from api.connectors.recaptcha import RECAPTCHA_VERIFY_URL, RecaptchaVerifier
from utils.errors import ChallengeVerificationError


def _verifier(handler) -> RecaptchaVerifier:
    config = HttpClientConfig(transport=httpx.MockTransport(handler))
    return RecaptchaVerifier(http_client=HttpClient(config))


@pytest.mark.asyncio
async def test_verify_accepts_successful_response() -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json={"success": True, "hostname": "example.com"})

    await _verifier(handler).verify("site-secret", "user-token")

    assert len(requests) == 1
    assert str(requests[0].url) == RECAPTCHA_VERIFY_URL
    assert json.loads(requests[0].content) == {
        "secret": "site-secret",
        "response": "user-token",
    }


@pytest.mark.asyncio
async def test_verify_raises_with_provider_error_codes() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            json={"success": False, "error-codes": ["invalid-input-response", "timeout-or-duplicate"]},
        )

    with pytest.raises(ChallengeVerificationError) as exc_info:
        await _verifier(handler).verify("secret", "bad-token")

    assert exc_info.value.error_codes == ["invalid-input-response", "timeout-or-duplicate"]
    assert '"invalid-input-response" "timeout-or-duplicate"' in str(exc_info.value)


@pytest.mark.asyncio
async def test_verify_requires_literal_true() -> None:
    handler = lambda request: httpx.Response(200, json={"success": "true"})  # noqa: E731

    with pytest.raises(ChallengeVerificationError) as exc_info:
        await _verifier(handler).verify("secret", "token")

    assert exc_info.value.error_codes == []


@pytest.mark.asyncio
async def test_verify_wraps_transport_failure() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("unreachable", request=request)

    with pytest.raises(ChallengeVerificationError, match="error doing request"):
        await _verifier(handler).verify("secret", "token")


@pytest.mark.asyncio
async def test_verify_wraps_provider_http_error() -> None:
    handler = lambda request: httpx.Response(500, text="oops")  # noqa: E731

    with pytest.raises(ChallengeVerificationError):
        await _verifier(handler).verify("secret", "token")
