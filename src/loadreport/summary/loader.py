"""Loading run summaries exported by the host engine."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .schema import Summary

logger = logging.getLogger(__name__)


class SummaryError(Exception):
    """Base exception for summary loading errors."""

    pass


class SummaryFileNotFoundError(SummaryError):
    """Raised when the summary file does not exist."""

    pass


class SummaryParseError(SummaryError):
    """Raised when the summary file is not a JSON object."""

    pass


def parse_summary(data: Summary | dict[str, Any]) -> Summary:
    """Validate raw summary data into a :class:`Summary`.

    Args:
        data: Summary mapping as produced by the host, or an existing Summary

    Returns:
        Summary model (``data`` itself when it already is one)

    Raises:
        pydantic.ValidationError: If a present field has an incompatible type
    """
    if isinstance(data, Summary):
        return data
    return Summary.model_validate(data)


def load_summary(path: str | Path) -> Summary:
    """Load a JSON summary export from disk.

    Args:
        path: Path to the JSON file

    Returns:
        Parsed Summary

    Raises:
        SummaryFileNotFoundError: If the file doesn't exist
        SummaryParseError: If the file isn't valid JSON or isn't an object
    """
    path = Path(path)
    if not path.exists():
        raise SummaryFileNotFoundError(f"Summary file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise SummaryParseError(f"Failed to parse summary JSON: {e}")  # noqa: B904

    if not isinstance(data, dict):
        raise SummaryParseError(
            f"Summary must be a JSON object, got {type(data).__name__}: {path}"
        )

    logger.debug(f"Loaded summary from {path}")
    return parse_summary(data)
