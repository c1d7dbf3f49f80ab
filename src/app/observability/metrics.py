"""Registro de métricas via structured logging.

As métricas são registradas como logs estruturados e podem ser agregadas
posteriormente (Cloud Logging, BigQuery, etc.).

Métricas suportadas:
- Latência: tempo de processamento por componente/operação
- Resultado: status HTTP final de cada requisição admitida

Uso:
    start = time.perf_counter()
    # ... operação ...
    record_latency("forms", "submit", (time.perf_counter() - start) * 1000)
    record_request_outcome(site_id=42, status_code=200)
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "forms")
        operation: Nome da operação (ex: "submit")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação para rastreamento
    """
    extra: dict[str, object] = {
        "metric_type": "latency",
        "component": component,
        "operation": operation,
        "latency_ms": round(latency_ms, 2),
    }
    if correlation_id:
        extra["correlation_id"] = correlation_id
    logger.info("metric_latency", extra=extra)


def record_request_outcome(
    *,
    status_code: int,
    site_id: int | None = None,
    channel_kind: str | None = None,
    correlation_id: str | None = None,
) -> None:
    """Registra o resultado de uma requisição de formulário.

    Args:
        status_code: Status HTTP devolvido
        site_id: Site resolvido (None quando o path não foi reconhecido)
        channel_kind: Tipo do canal ("mail", "telegram")
        correlation_id: ID de correlação para rastreamento
    """
    extra: dict[str, object] = {
        "metric_type": "request_outcome",
        "component": "forms",
        "status_code": status_code,
        "success": status_code < 400,
    }
    if site_id is not None:
        extra["site_id"] = site_id
    if channel_kind:
        extra["channel_kind"] = channel_kind
    if correlation_id:
        extra["correlation_id"] = correlation_id
    logger.info("metric_request_outcome", extra=extra)
