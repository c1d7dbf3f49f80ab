"""Endpoint de recebimento de formulários por site.

Endpoint:
- POST /{site_id}: formulário JSON de um site registrado

Ordem das checagens (a primeira falha responde e encerra):
1. Servidor em drain → 503 (requisição não é contada)
2. Requisição registrada como em andamento (liberada em qualquer saída)
3. site_id inválido (não uint64) → 404
4. site_id não registrado → 404 (mesma resposta do item 3)
5. Preflight CORS aceito → 200 com cabeçalhos CORS; outro método
   diferente de POST → 405
6. Content-Type diferente de application/json → 400
7. Falha lendo o body → 502
8. Parse, email, reCAPTCHA, sanitização e entrega (use case)

Resposta sempre JSON: {"success": bool, "error"?: str}.
"""

from __future__ import annotations

import logging
import re
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from starlette.requests import ClientDisconnect

from api.routes.forms.cors import is_preflight, preflight_headers
from app.domain.form import RequestOutcome
from app.observability import correlation_scope, record_latency, record_request_outcome
from app.services.site_registry import MAX_SITE_ID
from app.use_cases.forms import SubmissionErrorCode

if TYPE_CHECKING:
    from app.context import ServerContext

logger = logging.getLogger(__name__)

router = APIRouter()

JSON_MEDIA_TYPE = "application/json"
CORRELATION_ID_HEADER = "x-correlation-id"

# Sem equivalente exato em HTTP; mantém o contrato público do serviço
STATUS_BODY_READ_ERROR = status.HTTP_502_BAD_GATEWAY

ACCEPTED_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

_SITE_ID_PATTERN = re.compile(r"[0-9]+")

_STATUS_BY_ERROR: dict[SubmissionErrorCode, int] = {
    SubmissionErrorCode.MALFORMED_JSON: status.HTTP_400_BAD_REQUEST,
    SubmissionErrorCode.INVALID_EMAIL: status.HTTP_400_BAD_REQUEST,
    SubmissionErrorCode.CHALLENGE_FAILED: status.HTTP_400_BAD_REQUEST,
    SubmissionErrorCode.DELIVERY_FAILED: status.HTTP_503_SERVICE_UNAVAILABLE,
}


@dataclass
class _RequestTrace:
    """Dados resolvidos durante a requisição, usados nas métricas."""

    site_id: int | None = None
    channel_kind: str | None = None


def parse_site_id(segment: str) -> int | None:
    """Converte o segmento do path em site_id (uint64 decimal).

    Returns:
        site_id ou None se o segmento não for um uint64 válido
    """
    if _SITE_ID_PATTERN.fullmatch(segment) is None:
        return None
    site_id = int(segment)
    if site_id > MAX_SITE_ID:
        return None
    return site_id


def outcome_response(
    status_code: int,
    error: str | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Monta a resposta JSON padrão do serviço."""
    outcome = RequestOutcome.ok() if error is None else RequestOutcome.failure(error)
    return JSONResponse(
        content=outcome.to_payload(),
        status_code=status_code,
        headers=headers,
        media_type=JSON_MEDIA_TYPE,
    )


@router.api_route(
    "/{site_path:path}",
    methods=ACCEPTED_METHODS,
    response_model=None,
    include_in_schema=False,
)
async def submit_form(request: Request, site_path: str) -> JSONResponse:
    """Recebe um formulário e o entrega pelo canal do site."""
    context: ServerContext = request.app.state.context
    coordinator = context.coordinator

    with correlation_scope(request.headers.get(CORRELATION_ID_HEADER)) as correlation_id:
        if not coordinator.try_admit():
            logger.debug("form_rejected_closing_server")
            return outcome_response(status.HTTP_503_SERVICE_UNAVAILABLE, "closing server")

        started_at = time.perf_counter()
        trace = _RequestTrace()
        try:
            response = await _process_admitted(request, site_path, context, trace)
        except Exception:
            logger.exception("form_processing_failed")
            response = outcome_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "internal_error")
        finally:
            coordinator.release()

        record_latency(
            "forms",
            "submit",
            (time.perf_counter() - started_at) * 1000,
            correlation_id,
        )
        record_request_outcome(
            status_code=response.status_code,
            site_id=trace.site_id,
            channel_kind=trace.channel_kind,
            correlation_id=correlation_id,
        )
        return response


async def _process_admitted(
    request: Request,
    site_path: str,
    context: ServerContext,
    trace: _RequestTrace,
) -> JSONResponse:
    not_found = f"path {request.url.path} not found"

    site_id = parse_site_id(site_path)
    if site_id is None:
        logger.debug("form_site_id_invalid", extra={"path": request.url.path})
        return outcome_response(status.HTTP_404_NOT_FOUND, not_found)

    channel = context.registry.lookup(site_id)
    if channel is None:
        logger.debug("form_site_not_found", extra={"site_id": site_id})
        return outcome_response(status.HTTP_404_NOT_FOUND, not_found)
    trace.site_id = site_id
    trace.channel_kind = channel.kind

    if request.method != "POST":
        if is_preflight(request.method, request.headers):
            cors_headers = preflight_headers(
                request.headers, request.app.state.cors_allowed_origins
            )
            if cors_headers is not None:
                logger.debug("form_preflight_accepted", extra={"site_id": site_id})
                return outcome_response(status.HTTP_200_OK, headers=cors_headers)
        logger.debug("form_method_not_allowed", extra={"method": request.method})
        return outcome_response(
            status.HTTP_405_METHOD_NOT_ALLOWED,
            f"method {request.method} not supported",
        )

    content_type = request.headers.get("content-type", "")
    if content_type != JSON_MEDIA_TYPE:
        logger.debug("form_content_type_invalid", extra={"content_type": content_type})
        return outcome_response(
            status.HTTP_400_BAD_REQUEST,
            f"content-type {content_type} not supported",
        )

    try:
        raw_body = await request.body()
    except (ClientDisconnect, OSError) as exc:
        logger.error("form_body_read_failed", extra={"error_type": type(exc).__name__})
        return outcome_response(
            STATUS_BODY_READ_ERROR,
            "unknown error while reading request body",
        )

    result = await context.submission.execute(channel, raw_body)
    if result.error_code is None:
        logger.debug("form_request_succeeded", extra={"site_id": site_id})
        return outcome_response(status.HTTP_200_OK)

    return outcome_response(_STATUS_BY_ERROR[result.error_code], result.error_message)
