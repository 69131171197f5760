# ABOUTME: pulselog command-line entry point
# ABOUTME: Typer app that extracts heart rates from log files and runs the example checks

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from .checks import run_checks
from .config import OUTPUT_FORMATS, Settings, get_settings
from .extractor import scan_heart_rates
from .reader import read_log_file

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="pulselog",
    help="Extract plausible heart-rate readings from log text",
    add_completion=False,
)
console = Console()


def _load_settings() -> Settings:
    try:
        return get_settings()
    except ValidationError as e:
        logger.error(f"Failed to load settings: {e}")
        raise typer.Exit(code=1) from e


def _format_value(value: float) -> str:
    # 72.0 prints as 72, 75.5 stays 75.5
    return str(int(value)) if value.is_integer() else str(value)


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Logging level (overrides PULSELOG_LOG_LEVEL)",
    ),
):
    """pulselog - heart-rate extraction from free-form log text."""
    settings = _load_settings()
    level = (log_level or settings.log_level).upper()

    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@app.command()
def extract(
    file: Optional[Path] = typer.Argument(
        None,
        help="Log file to read; reads stdin when omitted or '-'",
    ),
    output_format: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format: json or lines (overrides PULSELOG_OUTPUT_FORMAT)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show every HeartRate token and why it was kept or dropped",
    ),
):
    """Extract heart-rate readings from a log file or stdin."""
    settings = _load_settings()

    fmt = (output_format or settings.output_format).lower()
    if fmt not in OUTPUT_FORMATS:
        logger.error(f"Unknown output format: {fmt}")
        raise typer.Exit(code=1)

    from_stdin = file is None or str(file) == "-"
    source = "stdin" if from_stdin else str(file)
    try:
        if from_stdin:
            text = sys.stdin.buffer.read().decode(settings.encoding)
        else:
            text = read_log_file(file, encoding=settings.encoding)
    except UnicodeDecodeError as e:
        logger.error(f"Failed to decode {source} as {settings.encoding}: {e}")
        raise typer.Exit(code=1) from e

    if text is None:
        logger.error(f"Log file not found: {file}")
        raise typer.Exit(code=1)

    tokens = list(scan_heart_rates(text))
    readings = [token.value for token in tokens if token.accepted]
    logger.info(f"Found {len(tokens)} HeartRate tokens, kept {len(readings)}")

    if verbose:
        table = Table(title="HeartRate tokens")
        table.add_column("Offset", justify="right")
        table.add_column("Raw")
        table.add_column("Value", justify="right")
        table.add_column("Status")

        for token in tokens:
            status = "[green]kept[/green]" if token.accepted else f"[red]{token.reason.value}[/red]"
            table.add_row(str(token.position), token.raw, str(token.value), status)

        console.print(table, highlight=False)

    if fmt == "json":
        typer.echo(json.dumps(readings))
    else:
        for value in readings:
            typer.echo(_format_value(value))


@app.command()
def check():
    """Run the built-in example checks against the extractor."""
    report = run_checks()

    table = Table(title="Example checks")
    table.add_column("#", justify="right")
    table.add_column("Check")
    table.add_column("Expected")
    table.add_column("Got")
    table.add_column("Result")

    for index, result in enumerate(report.results, start=1):
        case = result.case
        expected = "InvalidArgumentError" if case.expects_error else str(case.expected)
        got = result.error if result.actual is None else str(result.actual)
        outcome = "[green]PASSED[/green]" if result.passed else "[red]FAILED[/red]"
        table.add_row(str(index), case.name, expected, got or "", outcome)

    console.print(table)
    console.print(f"\nTotal: [bold]{report.total}[/bold]")
    console.print(f"Passed: [green]{report.passed}[/green]")
    console.print(f"Failed: {'[red]' if report.failed else '[green]'}{report.failed}[/]")
    console.print(f"Success rate: [bold]{report.success_rate:.1f}%[/bold]")

    if not report.all_passed:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
