"""Console digest rendering."""

from __future__ import annotations

from loadreport.summary import Summary

from .formatting import format_text_metric

BANNER_WIDTH = 80
_RULE = "━" * BANNER_WIDTH


class TextRenderer:
    """Renders a short plain-text digest of a run summary.

    Only trend metrics (those with an ``avg``) are listed; counters, gauges
    and rates are left to the HTML report.
    """

    title = "Test Execution Summary"

    def render(self, summary: Summary) -> str:
        lines = ["", _RULE, f"  {self.title}", _RULE, ""]

        if summary.metrics:
            lines.append("Metrics:")
            for name, record in summary.metrics.items():
                values = record.values
                if values.get("avg") is None:
                    continue
                line = f"  {name}: avg={format_text_metric(values['avg'], name)}"
                if values.get("p(95)") is not None:
                    line += f", p(95)={format_text_metric(values['p(95)'], name)}"
                lines.append(line)
            lines.append("")

        return "\n".join(lines) + "\n"
