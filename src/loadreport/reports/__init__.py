"""Reports module for loadreport.

Generates HTML reports and console digests from run summaries.
"""

from .classifier import DisplayMetric, MetricKind, classify, describe_metric
from .formatting import format_metric, format_text_metric
from .generator import (
    ReportGenerator,
    format_timestamp,
    generate_report,
    report_path,
    sanitize_for_filename,
)
from .html import HtmlRenderer, escape_html
from .text import TextRenderer

__all__ = [
    "DisplayMetric",
    "HtmlRenderer",
    "MetricKind",
    "ReportGenerator",
    "TextRenderer",
    "classify",
    "describe_metric",
    "escape_html",
    "format_metric",
    "format_text_metric",
    "format_timestamp",
    "generate_report",
    "report_path",
    "sanitize_for_filename",
]
