"""Shared fixtures for loadreport test suite."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

import pytest

FIXED_INSTANT = datetime(2024, 5, 1, 12, 30, 45, 123000, tzinfo=timezone.utc)


def make_summary(**overrides: Any) -> dict[str, Any]:
    """Create a raw summary dict shaped like a real end-of-test summary.

    This is the canonical summary factory for tests.  Top-level keys in
    ``overrides`` replace the defaults wholesale.
    """
    base: dict[str, Any] = {
        "metrics": {
            "http_reqs": {"values": {"count": 12345, "rate": 41.15}},
            "http_req_duration": {
                "values": {"avg": 250.0, "p(95)": 1500.0, "max": 2300.0, "min": 12.0},
                "thresholds": {
                    "p(95)<2000": {"ok": True},
                    "avg<100": {"ok": False},
                },
            },
            "http_req_failed": {"values": {"rate": 0.004, "passes": 4, "fails": 996}},
            "vus": {"values": {"value": 10, "min": 1, "max": 10}},
            "data_sent": {"values": {"count": 1536, "rate": 5.12}},
        },
        "root_group": {
            "checks": [
                {"name": "status is 200", "passes": 990, "fails": 10},
                {"name": "body not empty", "passes": 1000, "fails": 0},
            ]
        },
        "state": {"testRunDurationMs": 300000},
    }
    base.update(overrides)
    return base


def fixed_clock() -> datetime:
    return FIXED_INSTANT


@pytest.fixture
def summary_data() -> dict[str, Any]:
    """A representative raw summary for tests that don't care about specifics."""
    return make_summary()
