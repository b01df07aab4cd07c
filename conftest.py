"""Pytest configuration for loadreport."""

# Prevent collection from source tree
collect_ignore = ["src"]


def pytest_configure(config):
    """Register custom test markers."""
    config.addinivalue_line("markers", "cli: Tests that drive the typer app end to end")
