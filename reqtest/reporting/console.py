"""
Console output for test runs.

Headers, successes and warnings go to stdout; aborts, failures and
request errors go to stderr.
"""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.markup import escape

from ..assertions.models import EvaluationResult, Outcome, format_value
from ..suite.models import TestDefinition

console = Console()
err_console = Console(stderr=True)

SEPARATOR = "*" * 50


def print_value(value: Any, out: Console | None = None) -> None:
    """Print a payload: JSON for objects and arrays, plain text otherwise."""
    out = out or console
    if isinstance(value, (dict, list)):
        out.print_json(data=value, default=str)
    else:
        out.print(escape(format_value(value)))


def print_header(number: int, test: TestDefinition, out: Console | None = None) -> None:
    """Print the banner shown before a test runs."""
    out = out or console
    out.print(f"\n\n\t{SEPARATOR}")
    title = f" - {escape(str(test.title))}" if test.title else ""
    out.print(f"\n[bold]TEST #{number}[/bold]{title}")
    if test.method and test.url:
        out.print(f"{escape(str(test.method).upper())} {escape(str(test.url))}")
    if test.has_body:
        print_value(test.body, out)
    out.print()


def print_result(
    result: EvaluationResult,
    out: Console | None = None,
    err: Console | None = None,
) -> None:
    """Print the outcome of a test."""
    out = out or console
    err = err or err_console

    if result.outcome == Outcome.SUCCEEDED:
        if result.warning:
            out.print(f"[yellow]{escape('[WARN] ' + result.warning)}[/yellow]\n")
        out.print("[green]Test Succeeded![/green]\n")
        if result.operator is None:
            out.print("Response :")
            print_value(result.response, out)
        else:
            out.print(escape(result.message))
        return

    if result.outcome == Outcome.FAILED:
        err.print("[red]Test failed![/red]")
        err.print(f"\n{escape(result.message)} :")
        err.print(escape(format_value(result.expected)))
        err.print("\nGot :")
        err.print(escape(format_value(result.actual)))
        hint = result.details.get("hint")
        if hint:
            err.print(f"\n[dim]{escape(hint)}[/dim]")
        return

    if result.outcome == Outcome.ABORTED:
        err.print("[red]Test aborted![/red]")
        err.print(f"\n{escape(result.message)}")
        return

    err.print("[red]Test failed![/red]")
    err.print(escape(result.message))
