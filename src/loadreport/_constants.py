"""Shared constants for loadreport."""

# Reserved output key whose content the host prints instead of writing to disk.
CONSOLE_KEY = "stdout"

# Directory prefix for generated HTML reports when no output dir is given.
DEFAULT_OUTPUT_DIR = "reports"

# Base name used when the report name is absent or sanitizes to nothing.
DEFAULT_REPORT_NAME = "default"

# Shown in place of a metric value that could not be derived.
MISSING_VALUE = "N/A"
