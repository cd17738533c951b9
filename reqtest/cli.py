#!/usr/bin/env python3
"""
reqtest CLI - HTTP Request Assertion Runner

Usage:
    reqtest run <suite.json|suite.yaml> [OPTIONS]
    reqtest validate <suite.json|suite.yaml>
    reqtest --version
"""

import asyncio
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from . import __version__
from .assertions import TestEvaluator, check_definition
from .reporting import Reporter, RunStatus, console, err_console
from .runner import SequentialRunner
from .suite import Suite, TestDefinitionError, interpolate_suite, load_suite
from .transport import create_client

app = typer.Typer(
    name="reqtest",
    help="🧪 reqtest - HTTP Request Assertion Runner",
    add_completion=False,
)


def version_callback(value: bool):
    if value:
        console.print(f"🧪 reqtest v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None, "--version", "-v", callback=version_callback, is_eager=True,
        help="Show version and exit"
    ),
):
    """
    🧪 reqtest - HTTP Request Assertion Runner

    Send the HTTP requests listed in a JSON or YAML suite and check the
    responses against expected values.
    """
    pass


def configure_logging(debug: bool) -> None:
    """Send debug logs to stderr through rich."""
    if not debug:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


async def run_suite_async(
    suite: Suite,
    quiet: bool = False,
    timeout_ms: Optional[int] = None,
) -> Reporter:
    """Execute a suite and return the reporter with results."""
    suite = interpolate_suite(suite)
    reporter = Reporter.from_suite(suite)
    reporter.start_run()

    if not quiet:
        console.print(f"\n{'='*60}")
        console.print(f"  [bold]Running:[/bold] {escape(suite.name)}")
        console.print(f"  [bold]Tests:[/bold] {len(suite.tests)}")
        console.print(f"{'='*60}")

    async with create_client(suite, timeout_ms=timeout_ms) as client:
        runner = SequentialRunner(TestEvaluator(client), reporter=reporter, quiet=quiet)
        await runner.run(suite.tests)

    reporter.finish_run()
    return reporter


@app.command()
def run(
    suite_file: Path = typer.Argument(
        ...,
        help="Path to the suite file (.json, .yaml or .yml)",
        exists=True,
        readable=True,
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q",
        help="Only show failures and final status"
    ),
    output: str = typer.Option(
        "text", "--output", "-o",
        help="Output format: text or json (json implies --quiet)"
    ),
    report_dir: Path = typer.Option(
        Path("reports"), "--report-dir", "-r",
        help="Directory to save JSON reports"
    ),
    no_report: bool = typer.Option(
        False, "--no-report",
        help="Don't save a JSON report file"
    ),
    timeout_ms: Optional[int] = typer.Option(
        None, "--timeout-ms",
        help="Client-wide request timeout in milliseconds (overrides defaults.timeout_ms)",
        min=0,
    ),
    debug: bool = typer.Option(
        False, "--debug",
        help="Log each request to stderr"
    ),
):
    """
    Run a request test suite.

    Send every request in order, compare each response with its
    expectation, and generate a run report.
    """
    configure_logging(debug)

    # stdout carries only the JSON document
    if output == "json":
        quiet = True

    if not quiet:
        console.print(f"\n📄 Loading suite: {suite_file}")

    suite, validation = load_suite(suite_file)

    if not validation.is_valid:
        err_console.print(f"\n[red]❌ Validation failed:[/red]")
        err_console.print(escape(str(validation)))
        raise typer.Exit(code=1)

    if not quiet:
        console.print(f"   [green]✅ Valid suite:[/green] {escape(suite.name)}")

    reporter = asyncio.run(run_suite_async(suite, quiet=quiet, timeout_ms=timeout_ms))
    report = reporter.report

    if output == "json":
        console.print_json(report.to_json())
    elif not quiet:
        console.print("\n" + escape(report.summary()))

    if not no_report:
        report_dir.mkdir(parents=True, exist_ok=True)
        report_path = report_dir / f"{report.run_id}.json"
        reporter.save_json(report_path)
        if not quiet:
            console.print(f"\n📁 Report saved: {report_path}")

    if report.status == RunStatus.PASSED:
        raise typer.Exit(code=0)
    raise typer.Exit(code=1)


@app.command()
def validate(
    suite_file: Path = typer.Argument(
        ...,
        help="Path to the suite file (.json, .yaml or .yml)",
        exists=True,
        readable=True,
    ),
):
    """
    Validate a suite file.

    Check the file layout and show which tests would be aborted, without
    sending any request.
    """
    console.print(f"\n📄 Validating: {suite_file}")

    suite, validation = load_suite(suite_file)

    if not validation.is_valid:
        err_console.print(f"\n[red]❌ Validation failed:[/red]")
        err_console.print(escape(str(validation)))
        raise typer.Exit(code=1)

    console.print(f"\n[green]✅ Valid suite:[/green] {escape(suite.name)}")
    console.print(f"   Tests: {len(suite.tests)}")

    table = Table(title="Tests")
    table.add_column("#", style="cyan", justify="right")
    table.add_column("Title")
    table.add_column("Request", style="magenta")
    table.add_column("Operator")
    table.add_column("Check")

    runnable = 0
    for number, test in enumerate(suite.tests, start=1):
        try:
            method, operator = check_definition(test)
        except TestDefinitionError as e:
            status = f"[red]aborts: {escape(str(e))}[/red]"
            request = escape(f"{str(test.method or '?').upper()} {test.url or '?'}")
            op = escape(str(test.operator)) if test.operator else "eq"
        else:
            runnable += 1
            status = "[green]ok[/green]" if test.has_expect else "[yellow]no expect[/yellow]"
            request = escape(f"{method.value.upper()} {test.url}")
            op = operator.value
        table.add_row(str(number), escape(test.title or ""), request, op, status)

    console.print()
    console.print(table)

    if runnable < len(suite.tests):
        console.print(f"\n[yellow]⚠️  {len(suite.tests) - runnable} test(s) will be aborted[/yellow]")


@app.command()
def info():
    """
    Show information about reqtest.
    """
    console.print(f"""
🧪 [bold]reqtest[/bold] v{__version__}

HTTP Request Assertion Runner

[bold]Features:[/bold]
  • JSON or YAML test suites (a bare list of tests works too)
  • get, put, post, delete and patch requests
  • eq, ne, gt, gte, lt and lte comparisons
  • {{{{env.NAME}}}} interpolation and suite-wide auth (Bearer, API Key, Basic)
  • Detailed JSON run reports

[bold]Quick Start:[/bold]
  reqtest run parameters.json
  reqtest validate parameters.json
""")


if __name__ == "__main__":
    app()
