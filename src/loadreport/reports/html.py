"""HTML report rendering.

Builds a single self-contained page (inline CSS, no scripts) with three
optional sections: metric cards, threshold results and check results.
Metric names, threshold expressions and check names come from the test
script and are escaped before they are placed in markup.
"""

from __future__ import annotations

import logging
from datetime import datetime

from markupsafe import escape

from loadreport.summary import CheckResult, Summary

from .classifier import DisplayMetric, describe_metric
from .formatting import to_fixed

logger = logging.getLogger(__name__)

# Metrics whose presence turns on the thresholds section.
THRESHOLD_METRICS = ("http_req_duration", "http_req_failed")


def escape_html(text: str) -> str:
    """Escape ``& < > " '`` for safe insertion into HTML text or attributes."""
    return str(escape(text))


class HtmlRenderer:
    """Renders a run summary as an HTML document."""

    title = "Load Test Report"

    def render(self, summary: Summary, generated_at: datetime) -> str:
        """Generate HTML content.

        Args:
            summary: Parsed run summary
            generated_at: Timestamp shown in the page header

        Returns:
            HTML string

        Raises:
            TypeError: If a metric value is not numeric
        """
        metrics_html = self._render_metrics_section(summary)
        thresholds_html = self._render_thresholds_section(summary)
        checks_html = self._render_checks_section(summary)
        generated = generated_at.strftime("%Y-%m-%d %H:%M:%S")
        run_state = "Completed" if summary.state.completed else "Running"

        html = f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{self.title} - {generated}</title>
    <style>
        :root {{
            --primary: #667eea;
            --success: #28a745;
            --danger: #dc3545;
            --bg: #f5f5f5;
            --card-bg: #ffffff;
            --text: #333333;
            --text-muted: #666666;
            --border: #f0f0f0;
        }}

        * {{
            box-sizing: border-box;
            margin: 0;
            padding: 0;
        }}

        body {{
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, Oxygen, Ubuntu, sans-serif;
            background: var(--bg);
            color: var(--text);
            padding: 20px;
        }}

        .container {{
            max-width: 1200px;
            margin: 0 auto;
        }}

        header {{
            background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
            color: white;
            padding: 30px;
            border-radius: 8px;
            margin-bottom: 20px;
        }}

        header h1 {{
            font-size: 28px;
            margin-bottom: 10px;
        }}

        .meta {{
            opacity: 0.9;
            font-size: 14px;
        }}

        section {{
            background: var(--card-bg);
            padding: 20px;
            border-radius: 8px;
            margin-bottom: 20px;
            box-shadow: 0 2px 4px rgba(0,0,0,0.1);
        }}

        section h2 {{
            color: var(--primary);
            margin-bottom: 15px;
            padding-bottom: 10px;
            border-bottom: 2px solid var(--border);
        }}

        .metrics-grid {{
            display: grid;
            grid-template-columns: repeat(auto-fit, minmax(250px, 1fr));
            gap: 15px;
        }}

        .metric-card {{
            background: #f8f9fa;
            padding: 15px;
            border-radius: 6px;
            border-left: 4px solid var(--primary);
            overflow: hidden;
        }}

        .metric-card h3 {{
            font-size: 12px;
            text-transform: uppercase;
            letter-spacing: 0.5px;
            color: var(--text-muted);
            margin-bottom: 8px;
            overflow-wrap: break-word;
        }}

        .metric-value {{
            font-size: 24px;
            font-weight: bold;
        }}

        .metric-unit, .metric-max {{
            font-size: 12px;
            color: var(--text-muted);
            font-weight: normal;
        }}

        .threshold-item, .check-item {{
            display: flex;
            justify-content: space-between;
            align-items: center;
            gap: 10px;
            padding: 8px 10px;
            margin: 5px 0;
        }}

        .threshold-label, .check-name {{
            flex: 1;
            min-width: 0;
            overflow-wrap: break-word;
        }}

        .threshold {{
            padding: 4px 12px;
            border-radius: 12px;
            font-size: 12px;
            font-weight: 600;
            white-space: nowrap;
        }}

        .threshold.pass {{
            background: #d4edda;
            color: #155724;
        }}

        .threshold.fail {{
            background: #f8d7da;
            color: #721c24;
        }}

        .check-item {{
            background: #f8f9fa;
            border-radius: 4px;
        }}

        .check-result {{
            font-size: 14px;
            font-weight: 600;
            white-space: nowrap;
        }}

        .check-pass {{
            color: var(--success);
        }}

        .check-fail {{
            color: var(--danger);
        }}

        footer {{
            text-align: center;
            padding: 20px;
            color: var(--text-muted);
            font-size: 14px;
        }}
    </style>
</head>
<body>
    <div class="container">
        <header>
            <h1>{self.title}</h1>
            <div class="meta">
                Generated: {generated}<br>
                Test State: {run_state}
            </div>
        </header>
{metrics_html}{thresholds_html}{checks_html}
        <footer>
            Generated by loadreport
        </footer>
    </div>
</body>
</html>"""

        return html

    def _render_metric_card(self, metric: DisplayMetric) -> str:
        p95_html = ""
        if metric.p95:
            p95_html = f'<span class="metric-unit">(p95: {escape_html(metric.p95)})</span>'
        max_html = ""
        if metric.show_max:
            max_html = f'<div class="metric-max">Max: {escape_html(metric.max_annotation)}</div>'
        return f"""
                <div class="metric-card">
                    <h3>{escape_html(metric.name)}</h3>
                    <div class="metric-value">
                        <span>{escape_html(metric.primary_value)}</span>
                        {p95_html}
                    </div>
                    {max_html}
                </div>"""

    def _render_metrics_section(self, summary: Summary) -> str:
        """Metric cards, one per metric in the summary's own order."""
        cards = "".join(
            self._render_metric_card(describe_metric(name, record))
            for name, record in summary.metrics.items()
        )
        return f"""
        <section>
            <h2>Metrics Overview</h2>
            <div class="metrics-grid">{cards}
            </div>
        </section>
"""

    def _render_thresholds_section(self, summary: Summary) -> str:
        """Threshold outcomes for ``http_req_duration``.

        The section appears whenever either HTTP threshold metric is
        present, even if it ends up empty.
        """
        if not any(name in summary.metrics for name in THRESHOLD_METRICS):
            return ""

        items = ""
        duration = summary.metrics.get("http_req_duration")
        if duration is not None:
            for expression, result in duration.thresholds.items():
                status, label = ("pass", "✓ PASS") if result.passed else ("fail", "✗ FAIL")
                items += f"""
            <div class="threshold-item">
                <span class="threshold-label">{escape_html(expression)}</span>
                <span class="threshold {status}">{label}</span>
            </div>"""

        return f"""
        <section>
            <h2>Thresholds</h2>{items}
        </section>
"""

    def _render_check(self, check: CheckResult) -> str:
        total = check.total
        pass_rate = to_fixed(check.passes / total * 100, 1)
        css = "check-pass" if check.passed else "check-fail"
        return f"""
                <div class="check-item">
                    <span class="check-name">{escape_html(check.name)}</span>
                    <span class="check-result {css}">
                        {check.passes}/{total} ({pass_rate}%)
                    </span>
                </div>"""

    def _render_checks_section(self, summary: Summary) -> str:
        """Check results; checks that never ran (0 passes, 0 fails) are skipped."""
        checks = summary.root_group.checks
        if not checks:
            return ""

        skipped = sum(1 for c in checks if c.total <= 0)
        if skipped:
            logger.debug(f"Skipping {skipped} checks with no evaluations")
        items = "".join(self._render_check(c) for c in checks if c.total > 0)

        return f"""
        <section>
            <h2>Checks</h2>
            <div class="checks">{items}
            </div>
        </section>
"""
