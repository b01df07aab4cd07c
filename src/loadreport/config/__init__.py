"""Configuration module for loadreport."""

from .loader import (
    ConfigError,
    ConfigFileNotFoundError,
    ConfigParseError,
    ConfigValidationError,
    load_options,
    load_yaml,
    validate_options,
)
from .schema import ReportOptions

__all__ = [
    "ConfigError",
    "ConfigFileNotFoundError",
    "ConfigParseError",
    "ConfigValidationError",
    "ReportOptions",
    "load_options",
    "load_yaml",
    "validate_options",
]
