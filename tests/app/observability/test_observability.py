"""Testes de correlation_id e métricas em log."""

from __future__ import annotations

import logging
import uuid

import pytest

from app.observability import (
    correlation_scope,
    get_correlation_id,
    record_latency,
    record_request_outcome,
    reset_correlation_id,
    set_correlation_id,
)
from app.observability.correlation import MAX_CORRELATION_ID_LENGTH


def test_scope_sets_and_restores() -> None:
    assert get_correlation_id() == ""

    with correlation_scope("req-42") as correlation_id:
        assert correlation_id == "req-42"
        assert get_correlation_id() == "req-42"

    assert get_correlation_id() == ""


@pytest.mark.parametrize(
    "raw",
    [None, "", "   ", "x" * (MAX_CORRELATION_ID_LENGTH + 1), "line\nbreak"],
)
def test_invalid_values_are_replaced_by_uuid(raw: str | None) -> None:
    token = set_correlation_id(raw)
    try:
        value = get_correlation_id()
        assert uuid.UUID(value).version == 4
    finally:
        reset_correlation_id(token)


def test_record_latency_logs_metric(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="app.observability.metrics"):
        record_latency("forms", "submit", 12.3456, "cid-1")

    record = caplog.records[-1]
    assert record.getMessage() == "metric_latency"
    assert record.latency_ms == 12.35
    assert record.correlation_id == "cid-1"


def test_record_request_outcome_logs_metric(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="app.observability.metrics"):
        record_request_outcome(status_code=503, site_id=42, channel_kind="mail")

    record = caplog.records[-1]
    assert record.getMessage() == "metric_request_outcome"
    assert record.status_code == 503
    assert record.success is False
    assert record.site_id == 42
    assert record.channel_kind == "mail"
