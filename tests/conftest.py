"""Shared pytest fixtures for the log-stats test suite."""

from __future__ import annotations

import json

import pytest

from logstats.models import LogRecord, Timestamp


@pytest.fixture
def make_record():
    """Factory for LogRecord with sensible defaults."""

    def _make(
        ts="2020-01-01 00:00:00.000000",
        level="INFO",
        operation="op1",
        transaction_id="t1",
        service="a",
        message="m",
    ) -> LogRecord:
        return LogRecord(
            service=service,
            level=level,
            timestamp=Timestamp.parse(ts),
            operation=operation,
            message=message,
            transaction_id=transaction_id,
        )

    return _make


@pytest.fixture
def scenario_logs() -> list[dict]:
    """Two records of one transaction, ten seconds apart, one error."""
    return [
        {
            "service": "a",
            "level": "ERROR",
            "timestamp": "2020-01-01 00:00:00.000000",
            "operation": "op1",
            "message": "m",
            "transaction_id": "t1",
        },
        {
            "service": "a",
            "level": "INFO",
            "timestamp": "2020-01-01 00:00:10.000000",
            "operation": "op1",
            "message": "m",
            "transaction_id": "t1",
        },
    ]


@pytest.fixture
def write_json(tmp_path):
    """Write an object (or raw text) to a temp file and return its path."""

    def _write(content, name="logs.json") -> str:
        path = tmp_path / name
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content), encoding="utf-8")
        return str(path)

    return _write
