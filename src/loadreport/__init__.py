"""Loadreport -- HTML and console reports for load-test run summaries."""

__version__ = "0.3.0"
