"""
Reporter for building and managing run reports.

This module provides the Reporter class which collects per-test
results into a RunReport.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING

from .models import RunReport, TestRecord, compute_suite_hash

if TYPE_CHECKING:
    from ..assertions.models import EvaluationResult
    from ..suite import Suite, TestDefinition


class Reporter:
    """
    Builds and manages run reports.

    Example:
        suite, _ = load_suite("parameters.json")
        reporter = Reporter.from_suite(suite)

        reporter.start_run()
        reporter.start_test(1, test)
        reporter.record(1, test, result)

        report = reporter.finish_run()
        print(report.summary())
    """

    def __init__(self, report: RunReport):
        """
        Initialize with a RunReport.

        Use Reporter.from_suite() for the typical case.
        """
        self.report = report
        self._started: dict[int, datetime] = {}

    @classmethod
    def from_suite(cls, suite: Suite, run_id: str | None = None) -> Reporter:
        """
        Create a Reporter for a parsed Suite.

        Args:
            suite: The suite to create a report for
            run_id: Optional custom run ID (auto-generated if not provided)
        """
        report = RunReport(
            suite_name=suite.name,
            suite_hash=compute_suite_hash({
                "name": suite.name,
                "tests": [t.to_dict() for t in suite.tests],
            }),
        )
        if run_id:
            report.run_id = run_id
        return cls(report)

    def start_run(self) -> None:
        """Mark the run as started."""
        self.report.start()

    def finish_run(self) -> RunReport:
        """Mark the run as completed and return the final report."""
        self.report.complete()
        return self.report

    def start_test(self, number: int, test: TestDefinition) -> None:
        """Note the time a test started."""
        self._started[number] = datetime.now(timezone.utc)

    def record(self, number: int, test: TestDefinition, result: EvaluationResult) -> TestRecord:
        """
        Add the result of a test to the report.

        Args:
            number: 1-based sequence number of the test
            test: The evaluated definition
            result: Its evaluation result
        """
        ended_at = datetime.now(timezone.utc)
        started_at = self._started.pop(number, None)

        record = TestRecord(
            number=number,
            title=test.title,
            method=str(test.method) if test.method is not None else None,
            url=str(test.url) if test.url is not None else None,
            outcome=result.outcome,
            started_at=started_at,
            ended_at=ended_at,
            duration_ms=(ended_at - started_at).total_seconds() * 1000 if started_at else None,
            operator=result.operator.value if result.operator else None,
            expected_value=result.expected,
            actual_value=result.actual,
            message=result.message,
            warning=result.warning,
            exit_code=result.exit_code,
        )
        self.report.add_test(record)
        return record

    def save_json(self, path: str | Path) -> None:
        """Save the report to a JSON file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.report.to_json())

    def get_summary(self) -> str:
        """Get a human-readable summary of the run."""
        return self.report.summary()
