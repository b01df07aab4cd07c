"""Unit-aware display formatting for metric values.

Two rule sets live here.  :func:`format_metric` is used by the HTML report
and knows about durations, ratios, byte sizes and counts.
:func:`format_text_metric` is used by the console digest and only knows
durations and ratios.  They are intentionally not unified: the console
digest keeps its lower fidelity.

Rules are matched by substring against the metric name, first match wins,
so the order of each table matters (``http_req_failed`` must hit the ratio
rule, ``data_sent`` must not fall into the count rule, etc.).
"""

from __future__ import annotations

import math
from collections.abc import Callable
from decimal import ROUND_HALF_UP, Context, Decimal

_KB = 1024
_MB = 1024**2
_GB = 1024**3

DURATION_TOKENS = (
    "duration",
    "time",
    "waiting",
    "connecting",
    "sending",
    "receiving",
    "blocked",
    "tls",
)
RATIO_TOKENS = ("rate", "percent", "failed")
DATA_SIZE_TOKENS = ("data_sent", "data_received")
COUNT_TOKENS = ("iterations", "http_reqs", "checks", "vus")

TEXT_DURATION_TOKENS = ("duration", "time")
TEXT_RATIO_TOKENS = ("rate", "percent")


def _matches(name: str, tokens: tuple[str, ...]) -> bool:
    return any(token in name for token in tokens)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


# Wide enough to quantize any finite float without InvalidOperation.
_FIXED_CONTEXT = Context(prec=400)


def to_fixed(value: float, places: int) -> str:
    """Fixed-point rendering that rounds exact ties away from zero.

    The exact binary value of ``value`` is rounded, so ``0.125`` (exactly
    representable) gives ``0.13`` while ``1.005`` (stored just below) gives
    ``1.00``.

    Raises:
        TypeError: If ``value`` is not a number
    """
    if not isinstance(value, (int, float)):
        raise TypeError(f"cannot format {type(value).__name__} as a number")
    quantum = Decimal(1).scaleb(-places)
    fixed = Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP, context=_FIXED_CONTEXT)
    return f"{fixed:f}"


def format_duration_ms(value: float) -> str:
    """Format milliseconds: ``250.00ms`` below one second, ``1.50s`` above."""
    if value < 1000:
        return f"{to_fixed(value, 2)}ms"
    return f"{to_fixed(value / 1000, 2)}s"


def format_ratio(value: float) -> str:
    """Format a 0..1 ratio as a percentage."""
    return f"{to_fixed(value * 100, 2)}%"


def format_bytes(value: float) -> str:
    """Format a byte count with binary (1024-based) scaling."""
    if value >= _GB:
        return f"{to_fixed(value / _GB, 2)}GB"
    if value >= _MB:
        return f"{to_fixed(value / _MB, 2)}MB"
    if value >= _KB:
        return f"{to_fixed(value / _KB, 2)}KB"
    return f"{to_fixed(value, 0)}B"


def format_number(value: float) -> str:
    """Format a plain number, abbreviating thousands and millions."""
    if value >= 1_000_000:
        return f"{to_fixed(value / 1_000_000, 2)}M"
    if value >= 1_000:
        return f"{to_fixed(value / 1_000, 2)}K"
    return to_fixed(value, 2)


def format_count(value: float) -> str:
    """Format a count as a grouped integer (``12,345``).

    Fractional counts below one are not rounded to zero; they use
    :func:`format_number` instead.
    """
    if value >= 1:
        return f"{_round_half_up(value):,}"
    return format_number(value)


# (tokens, formatter) in precedence order.
_HTML_RULES: tuple[tuple[tuple[str, ...], Callable[[float], str]], ...] = (
    (DURATION_TOKENS, format_duration_ms),
    (RATIO_TOKENS, format_ratio),
    (DATA_SIZE_TOKENS, format_bytes),
    (COUNT_TOKENS, format_count),
)

_TEXT_RULES: tuple[tuple[tuple[str, ...], Callable[[float], str]], ...] = (
    (TEXT_DURATION_TOKENS, format_duration_ms),
    (TEXT_RATIO_TOKENS, format_ratio),
)


def format_metric(value: float, metric_name: str) -> str:
    """Format a metric value for the HTML report.

    Args:
        value: Raw numeric value
        metric_name: Metric name, used to pick the unit

    Returns:
        Display string, e.g. ``"250.00ms"``, ``"0.40%"``, ``"1.50KB"``,
        ``"12,345"``

    Raises:
        TypeError: If ``value`` is not a number
    """
    for tokens, formatter in _HTML_RULES:
        if _matches(metric_name, tokens):
            return formatter(value)
    return format_number(value)


def format_text_metric(value: float, metric_name: str) -> str:
    """Format a metric value for the console digest.

    Only durations and ratios get units; everything else is a bare
    two-decimal number.

    Raises:
        TypeError: If ``value`` is not a number
    """
    for tokens, formatter in _TEXT_RULES:
        if _matches(metric_name, tokens):
            return formatter(value)
    return to_fixed(value, 2)
