"""
Reporting for test runs

This package prints per-test output and collects run reports.

Features:
    - Per-test headers and outcome lines (stdout / stderr)
    - Run metadata (ID, timestamp, suite info)
    - Per-test records with timing
    - JSON serialization
    - Human-readable summaries

Usage:
    from reqtest.reporting import Reporter

    reporter = Reporter.from_suite(suite)
    reporter.start_run()
    reporter.record(1, test, result)

    report = reporter.finish_run()
    print(report.summary())
    reporter.save_json("reports/run.json")
"""

# Console output
from .console import console, err_console, print_header, print_result, print_value

# Models
from .models import RunReport, RunStatus, TestRecord, compute_suite_hash

# Reporter
from .reporter import Reporter

__all__ = [
    # Console output
    "console",
    "err_console",
    "print_header",
    "print_result",
    "print_value",
    # Models
    "RunReport",
    "RunStatus",
    "TestRecord",
    "compute_suite_hash",
    # Reporter
    "Reporter",
]
