"""Pydantic models for the end-of-test run summary.

The host engine's summary format evolves independently of this package, so
every field is optional and falls back to an empty default.  Unknown keys
are ignored.  Metric values are kept exactly as supplied; a value of the
wrong type is only detected when it is formatted.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

UNKNOWN_CHECK_NAME = "Unknown check"


class _SummaryModel(BaseModel):
    """Base for summary models: tolerant of missing, null and extra keys."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        # A null field means "absent" in the host format -- use the default.
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class ThresholdResult(_SummaryModel):
    """Outcome of one threshold expression, as evaluated by the host."""

    ok: Any = None

    @property
    def passed(self) -> bool:
        """Only a literal boolean ``True`` counts as a pass."""
        return self.ok is True


class MetricRecord(_SummaryModel):
    """Aggregated values for one metric.

    ``values`` keys depend on the metric kind (``count``, ``value``,
    ``avg``, ``p(95)``, ``max``, ``rate``, ``passes``, ``fails``, ...).
    """

    values: dict[str, Any] = Field(default_factory=dict)
    thresholds: dict[str, ThresholdResult] = Field(default_factory=dict)


class CheckResult(_SummaryModel):
    """Aggregate pass/fail counts for one named check."""

    name: str = UNKNOWN_CHECK_NAME
    passes: int = 0
    fails: int = 0

    @field_validator("name")
    @classmethod
    def _blank_name_is_unknown(cls, v: str) -> str:
        return v or UNKNOWN_CHECK_NAME

    @property
    def total(self) -> int:
        return self.passes + self.fails

    @property
    def passed(self) -> bool:
        return self.fails == 0


class RootGroup(_SummaryModel):
    """Top-level group of the run; only its checks are reported."""

    checks: list[CheckResult] = Field(default_factory=list)


class RunState(_SummaryModel):
    """Run metadata supplied by the host."""

    test_run_duration_ms: float | None = Field(default=None, alias="testRunDurationMs")

    @property
    def completed(self) -> bool:
        return bool(self.test_run_duration_ms)


class Summary(_SummaryModel):
    """Root of the end-of-test summary."""

    metrics: dict[str, MetricRecord] = Field(default_factory=dict)
    root_group: RootGroup = Field(default_factory=RootGroup)
    state: RunState = Field(default_factory=RunState)
