"""Report generation for loadreport.

Turns an end-of-test summary into an output mapping::

    {
        "reports/report-<name>-executed-<timestamp>.html": "<!DOCTYPE html>...",
        "stdout": "\\n━━━━...",
    }

The host engine writes every key except ``stdout`` to disk and prints
``stdout``.  Nothing here performs I/O.

Report generation runs after the test has finished, so a crash here would
lose the run's results.  :meth:`ReportGenerator.generate` therefore never
raises: any failure yields a mapping holding only a diagnostic ``stdout``.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

from loadreport._constants import CONSOLE_KEY, DEFAULT_OUTPUT_DIR, DEFAULT_REPORT_NAME
from loadreport.config import ReportOptions, validate_options
from loadreport.summary import Summary, parse_summary

from .html import HtmlRenderer
from .text import TextRenderer

logger = logging.getLogger(__name__)

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def sanitize_for_filename(value: str | None) -> str:
    """Reduce a report name to ``[a-z0-9-]``, or ``default`` if nothing is left.

    >>> sanitize_for_filename("Checkout API -- Smoke!")
    'checkout-api-smoke'
    """
    if not value:
        return DEFAULT_REPORT_NAME
    sanitized = _NON_ALNUM_RE.sub("-", value.lower()).strip("-")
    return sanitized or DEFAULT_REPORT_NAME


def format_timestamp(moment: datetime) -> str:
    """Filesystem-safe UTC timestamp, e.g. ``2024-05-01T12-30-45-123Z``.

    Naive datetimes are taken to be UTC.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    iso = moment.strftime("%Y-%m-%dT%H:%M:%S") + f".{moment.microsecond // 1000:03d}Z"
    return iso.replace(":", "-").replace(".", "-")


def report_path(options: ReportOptions, moment: datetime) -> str:
    """Destination key for the HTML report."""
    # "/" keeps meaning the filesystem root: "/report-...".
    output_dir = (options.output_dir or DEFAULT_OUTPUT_DIR).rstrip("/")
    base_name = sanitize_for_filename(options.report_name)
    return f"{output_dir}/report-{base_name}-executed-{format_timestamp(moment)}.html"


class ReportGenerator:
    """Generates the HTML report and console digest for a run summary."""

    def __init__(
        self,
        options: ReportOptions | dict[str, Any] | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ):
        """Initialize report generator.

        Args:
            options: Report name and output directory
            clock: Returns the generation instant; injectable for tests
        """
        self.options = validate_options(options)
        self.clock = clock
        self.html_renderer = HtmlRenderer()
        self.text_renderer = TextRenderer()

    def generate(self, data: Summary | dict[str, Any]) -> dict[str, str]:
        """Generate report outputs.

        Args:
            data: Run summary as supplied by the host engine

        Returns:
            Mapping of destination to content.  Contains the HTML report path
            and ``stdout`` on success, only ``stdout`` on failure.
        """
        try:
            return self._generate(data)
        except Exception as e:
            message = str(e)
            logger.error(f"Error generating HTML report: {message}")
            return {CONSOLE_KEY: f"\nError generating report: {message}\n"}

    def _generate(self, data: Summary | dict[str, Any]) -> dict[str, str]:
        summary = parse_summary(data)
        moment = self.clock()
        path = report_path(self.options, moment)

        html = self.html_renderer.render(summary, generated_at=moment)
        text = self.text_renderer.render(summary)

        logger.info(f"Generated report: {path} ({len(summary.metrics)} metrics)")
        return {path: html, CONSOLE_KEY: text}


def generate_report(
    data: Summary | dict[str, Any],
    options: ReportOptions | dict[str, Any] | None = None,
) -> dict[str, str]:
    """Generate report outputs for ``data``; never raises.

    Option validation errors are reported the same way as rendering errors.
    """
    try:
        generator = ReportGenerator(options)
    except Exception as e:
        logger.error(f"Invalid report options: {e}")
        return {CONSOLE_KEY: f"\nError generating report: {e}\n"}
    return generator.generate(data)
