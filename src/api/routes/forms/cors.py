"""CORS dos formulários.

O preflight (OPTIONS com Access-Control-Request-Method) não é respondido
pelo middleware: segue para a rota e passa pelas mesmas checagens das
demais requisições (drain → 503, site desconhecido → 404), recebendo
resposta JSON. O middleware apenas acrescenta os cabeçalhos CORS às
respostas.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from starlette.datastructures import Headers
from starlette.middleware.cors import CORSMiddleware

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from starlette.types import Receive, Scope, Send

CORS_ALLOWED_METHODS = ("POST",)
CORS_ALLOWED_HEADERS = ("Content-Type", "X-Correlation-Id")
CORS_MAX_AGE_SECONDS = 600

_SAFELISTED_HEADERS = frozenset({"accept", "accept-language", "content-language", "content-type"})


class FormCorsMiddleware(CORSMiddleware):
    """CORSMiddleware que deixa o preflight chegar à rota de formulários."""

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        headers = Headers(scope=scope)
        if "origin" not in headers:
            await self.app(scope, receive, send)
            return

        await self.simple_response(scope, receive, send, request_headers=headers)


def is_preflight(method: str, headers: Mapping[str, str]) -> bool:
    return method == "OPTIONS" and "origin" in headers and (
        "access-control-request-method" in headers
    )


def preflight_headers(
    headers: Mapping[str, str],
    allowed_origins: Iterable[str],
) -> dict[str, str] | None:
    """Cabeçalhos de resposta para um preflight aceito.

    Returns:
        Cabeçalhos CORS, ou None se origem, método ou cabeçalhos
        pedidos não forem permitidos
    """
    origins = tuple(allowed_origins)
    origin = headers.get("origin", "")
    allow_all = "*" in origins
    if not allow_all and origin not in origins:
        return None

    if headers.get("access-control-request-method") not in CORS_ALLOWED_METHODS:
        return None

    requested = headers.get("access-control-request-headers", "")
    allowed_headers = _SAFELISTED_HEADERS | {name.lower() for name in CORS_ALLOWED_HEADERS}
    for raw_name in requested.split(","):
        name = raw_name.strip().lower()
        if name and name not in allowed_headers:
            return None

    return {
        "Access-Control-Allow-Origin": "*" if allow_all else origin,
        "Access-Control-Allow-Methods": ", ".join(CORS_ALLOWED_METHODS),
        "Access-Control-Allow-Headers": ", ".join(CORS_ALLOWED_HEADERS),
        "Access-Control-Max-Age": str(CORS_MAX_AGE_SECONDS),
    }
