"""Pydantic models for report options."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ReportOptions(BaseModel):
    """Options controlling where a report is written and what it is called.

    Both fields are optional: ``report_name`` falls back to ``default`` once
    sanitized and ``output_dir`` falls back to ``reports``.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    report_name: str | None = Field(
        default=None,
        alias="reportName",
        description="Human-readable name, sanitized into the report file name",
    )
    output_dir: str | None = Field(
        default=None,
        alias="outputDir",
        description="Directory prefix for the HTML report",
    )

    @field_validator("output_dir")
    @classmethod
    def strip_trailing_slash(cls, v: str | None) -> str | None:
        """Avoid a double slash when the directory is joined with the file name."""
        if v is None:
            return v
        stripped = v.rstrip("/")
        return stripped or v

    def merged(self, **overrides: str | None) -> ReportOptions:
        """Return a copy with every non-None override applied."""
        updates = {k: v for k, v in overrides.items() if v is not None}
        return ReportOptions.model_validate({**self.model_dump(), **updates})
