"""Metric kind classification.

The summary does not say what kind a metric is, so the kind is inferred from
which value keys are present.  A record can carry several candidate keys
(iteration counters have both ``count`` and ``max``), so the lookup order
below is fixed: count, value, avg, rate, max.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from loadreport._constants import MISSING_VALUE
from loadreport.summary import MetricRecord

from .formatting import format_metric


class MetricKind(str, Enum):
    """Structural kind of a metric."""

    COUNTER = "counter"
    GAUGE = "gauge"
    TREND = "trend"
    RATE = "rate"
    FALLBACK = "fallback"  # only ``max`` is known
    UNKNOWN = "unknown"


# Key that decides each kind, in precedence order.
_PRECEDENCE: tuple[tuple[str, MetricKind], ...] = (
    ("count", MetricKind.COUNTER),
    ("value", MetricKind.GAUGE),
    ("avg", MetricKind.TREND),
    ("rate", MetricKind.RATE),
    ("max", MetricKind.FALLBACK),
)

# Value key holding the primary display value for each kind.
PRIMARY_KEY: dict[MetricKind, str] = {kind: key for key, kind in _PRECEDENCE}


def _has(values: Mapping[str, Any], key: str) -> bool:
    return values.get(key) is not None


def classify(values: Mapping[str, Any]) -> MetricKind:
    """Determine a metric's kind from the keys in its value bag."""
    for key, kind in _PRECEDENCE:
        if _has(values, key):
            return kind
    return MetricKind.UNKNOWN


@dataclass(frozen=True)
class DisplayMetric:
    """Formatted values for one metric card."""

    name: str
    kind: MetricKind
    primary_value: str
    p95: str | None = None
    max_annotation: str | None = None

    @property
    def show_max(self) -> bool:
        """The max line is redundant when it reads the same as the primary value."""
        return self.max_annotation is not None and self.max_annotation != self.primary_value


def describe_metric(name: str, record: MetricRecord) -> DisplayMetric:
    """Classify a metric and format its display values.

    Raises:
        TypeError: If a value that has to be displayed is not numeric
    """
    values = record.values
    kind = classify(values)
    if kind is MetricKind.UNKNOWN:
        return DisplayMetric(name=name, kind=kind, primary_value=MISSING_VALUE)

    primary = format_metric(values[PRIMARY_KEY[kind]], name)
    p95: str | None = None
    max_annotation: str | None = None

    if kind in (MetricKind.COUNTER, MetricKind.GAUGE, MetricKind.TREND):
        if _has(values, "max"):
            max_annotation = format_metric(values["max"], name)
        if kind is MetricKind.TREND and _has(values, "p(95)"):
            p95 = format_metric(values["p(95)"], name)
    elif kind is MetricKind.RATE:
        if _has(values, "passes") and _has(values, "fails"):
            passes = values["passes"]
            max_annotation = f"{passes}/{passes + values['fails']}"

    return DisplayMetric(
        name=name,
        kind=kind,
        primary_value=primary,
        p95=p95,
        max_annotation=max_annotation,
    )
