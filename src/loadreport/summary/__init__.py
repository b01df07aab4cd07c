"""Summary module for loadreport.

Schema and loaders for the end-of-test summary supplied by the host engine.
"""

from .loader import (
    SummaryError,
    SummaryFileNotFoundError,
    SummaryParseError,
    load_summary,
    parse_summary,
)
from .schema import CheckResult, MetricRecord, RootGroup, RunState, Summary, ThresholdResult

__all__ = [
    "CheckResult",
    "MetricRecord",
    "RootGroup",
    "RunState",
    "Summary",
    "SummaryError",
    "SummaryFileNotFoundError",
    "SummaryParseError",
    "ThresholdResult",
    "load_summary",
    "parse_summary",
]
