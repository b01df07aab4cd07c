"""Loadreport CLI.

Plays the host's part for summaries exported to disk: loads the summary,
generates the outputs and writes them.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from loadreport import __version__
from loadreport._constants import CONSOLE_KEY
from loadreport.config import ConfigError, ReportOptions, load_options
from loadreport.reports import generate_report
from loadreport.summary import SummaryError, load_summary

# Default options file name for auto-discovery
DEFAULT_CONFIG = "loadreport.yaml"

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="loadreport",
    help="Render HTML reports and console digests from load-test summaries",
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()


# =============================================================================
# Helper Functions
# =============================================================================


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]OK[/green] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]ERROR[/red] {message}")


def resolve_options_path(config_file: Path | None) -> Path | None:
    """Return the options file to load, if any.

    An explicit path is returned as-is.  Otherwise ``./loadreport.yaml`` is
    used when it exists.
    """
    if config_file is not None:
        return config_file
    default = Path(DEFAULT_CONFIG)
    return default if default.exists() else None


def write_outputs(outputs: dict[str, str], base_dir: Path | None = None) -> list[Path]:
    """Write every file destination in ``outputs`` to disk.

    The console key is skipped.  Relative destinations are resolved against
    ``base_dir`` (default: the working directory).

    Returns:
        Paths written, in mapping order
    """
    written: list[Path] = []
    for destination, content in outputs.items():
        if destination == CONSOLE_KEY:
            continue
        path = Path(destination)
        if base_dir is not None and not path.is_absolute():
            path = base_dir / path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        logger.info(f"Wrote {path}")
        written.append(path)
    return written


# =============================================================================
# CLI Commands
# =============================================================================


@app.callback()
def _configure(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"loadreport version {__version__}")


@app.command()
def render(
    summary_file: Annotated[
        Path,
        typer.Argument(help="JSON summary exported by the test run"),
    ],
    name: Annotated[
        str | None,
        typer.Option("--name", "-n", help="Report name used in the file name"),
    ] = None,
    output_dir: Annotated[
        str | None,
        typer.Option("--output-dir", "-o", help="Directory for the HTML report"),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help=f"Options YAML (default: ./{DEFAULT_CONFIG})"),
    ] = None,
) -> None:
    """Generate the HTML report and console digest for a summary file."""
    try:
        options_path = resolve_options_path(config_file)
        options = load_options(options_path) if options_path else ReportOptions()
        summary = load_summary(summary_file)
    except (ConfigError, SummaryError) as e:
        print_error(str(e))
        raise typer.Exit(1)  # noqa: B904

    options = options.merged(report_name=name, output_dir=output_dir)
    outputs = generate_report(summary, options)

    console.print(outputs[CONSOLE_KEY], markup=False, highlight=False, soft_wrap=True, end="")
    if len(outputs) == 1:
        print_error("Report generation failed")
        raise typer.Exit(1)

    for path in write_outputs(outputs):
        print_success(f"Report written: {path}")


def main() -> None:
    """Main entry point for CLI."""
    app()


if __name__ == "__main__":
    main()
