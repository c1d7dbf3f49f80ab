"""Cliente HTTP base para conectores da camada API.

Uma única tentativa por chamada, com timeout fixo: o serviço não faz retry
de chamadas externas (reCAPTCHA, Bot API).
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True
    # Permite injetar httpx.MockTransport em testes
    transport: httpx.AsyncBaseTransport | None = None


class HttpError(Exception):
    """Erro de requisição HTTP sem dados sensíveis."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class HttpClient:
    """Cliente HTTP simples para chamadas externas JSON."""

    def __init__(self, config: HttpClientConfig | None = None) -> None:
        self._config = config or HttpClientConfig()

    @property
    def timeout_seconds(self) -> float:
        return self._config.timeout_seconds

    async def post(
        self,
        url: str,
        json: dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Executa POST JSON; status >= 400 e falhas de transporte viram HttpError."""
        merged_headers = {**self._config.default_headers, **(headers or {})}
        try:
            async with httpx.AsyncClient(
                verify=self._config.verify_ssl,
                transport=self._config.transport,
            ) as client:
                response = await client.post(
                    url,
                    json=json,
                    headers=merged_headers,
                    timeout=self._config.timeout_seconds,
                )
        except httpx.TimeoutException as exc:
            raise HttpError("http_timeout") from exc
        except httpx.HTTPError as exc:
            raise HttpError(f"http_connection_error: {type(exc).__name__}") from exc

        if response.status_code >= 400:
            raise HttpError(
                f"http_status_{response.status_code}",
                status_code=response.status_code,
            )
        return response

    async def post_json(
        self,
        url: str,
        json: dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        """Executa POST e devolve o corpo JSON (objeto) da resposta."""
        response = await self.post(url, json=json, headers=headers)
        return _decode_json_object(response)


def _decode_json_object(response: httpx.Response) -> dict[str, Any]:
    try:
        data = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        logger.warning(
            "http_response_json_invalid",
            extra={"status_code": response.status_code},
        )
        raise HttpError("invalid_json_response", status_code=response.status_code) from exc
    if not isinstance(data, dict):
        raise HttpError("unexpected_json_response", status_code=response.status_code)
    return data
