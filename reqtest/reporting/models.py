"""
Report data models for test runs.

This module defines the data structures for capturing complete
run records including metadata, per-test results, and timing.
"""

from __future__ import annotations

import hashlib
import json
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from ..assertions.comparison import canonical_json
from ..assertions.models import Outcome


class RunStatus(str, Enum):
    """Overall status of a test run."""
    PENDING = "pending"
    RUNNING = "running"
    PASSED = "passed"
    FAILED = "failed"
    ERROR = "error"


@dataclass
class TestRecord:
    """
    Record of a single test evaluation.

    Captures what was sent, how it concluded, what was compared and how
    long it took.
    """
    __test__ = False

    number: int
    title: str | None = None
    method: str | None = None
    url: str | None = None
    outcome: Outcome | None = None

    # Timing
    started_at: datetime | None = None
    ended_at: datetime | None = None
    duration_ms: float | None = None

    # Comparison
    operator: str | None = None
    expected_value: Any = None
    actual_value: Any = None

    # Messages
    message: str | None = None
    warning: str | None = None
    exit_code: int | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "number": self.number,
            "title": self.title,
            "method": self.method,
            "url": self.url,
            "outcome": self.outcome.value if self.outcome else None,
            "started_at": self.started_at.isoformat() if self.started_at else None,
            "ended_at": self.ended_at.isoformat() if self.ended_at else None,
            "duration_ms": self.duration_ms,
            "operator": self.operator,
            "expected_value": _safe_serialize(self.expected_value),
            "actual_value": _safe_serialize(self.actual_value),
            "message": self.message,
            "warning": self.warning,
            "exit_code": self.exit_code,
        }


@dataclass
class RunReport:
    """
    Complete record of a suite run.

    Contains metadata about the run, the suite being run, and a record
    for each test.
    """
    # Run identification
    run_id: str = field(default_factory=lambda: str(uuid.uuid4()))

    # Timing
    started_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    ended_at: datetime | None = None
    duration_ms: float | None = None

    # Suite info
    suite_name: str = ""
    suite_hash: str = ""

    # Overall status
    status: RunStatus = RunStatus.PENDING

    # Test records
    tests: list[TestRecord] = field(default_factory=list)

    # Summary stats
    total_tests: int = 0
    succeeded_tests: int = 0
    failed_tests: int = 0
    aborted_tests: int = 0
    error_tests: int = 0
    warning_tests: int = 0

    def start(self) -> None:
        """Mark the run as started."""
        self.status = RunStatus.RUNNING
        self.started_at = datetime.now(timezone.utc)

    def complete(self) -> None:
        """Mark the run as completed and calculate final status."""
        self.ended_at = datetime.now(timezone.utc)
        delta = self.ended_at - self.started_at
        self.duration_ms = delta.total_seconds() * 1000

        # Calculate summary stats
        self.total_tests = len(self.tests)
        self.succeeded_tests = sum(1 for t in self.tests if t.outcome == Outcome.SUCCEEDED)
        self.failed_tests = sum(1 for t in self.tests if t.outcome == Outcome.FAILED)
        self.aborted_tests = sum(1 for t in self.tests if t.outcome == Outcome.ABORTED)
        self.error_tests = sum(1 for t in self.tests if t.outcome == Outcome.REQUEST_ERROR)
        self.warning_tests = sum(1 for t in self.tests if t.warning)

        # Determine overall status
        if self.aborted_tests or self.error_tests:
            self.status = RunStatus.ERROR
        elif self.failed_tests:
            self.status = RunStatus.FAILED
        else:
            self.status = RunStatus.PASSED

    def add_test(self, record: TestRecord) -> None:
        """Add a test record to the run."""
        self.tests.append(record)

    def get_test(self, number: int) -> TestRecord | None:
        """Get a test record by its sequence number."""
        for record in self.tests:
            if record.number == number:
                return record
        return None

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "run_id": self.run_id,
            "started_at": self.started_at.isoformat() if self.started_at else None,
            "ended_at": self.ended_at.isoformat() if self.ended_at else None,
            "duration_ms": self.duration_ms,
            "suite_name": self.suite_name,
            "suite_hash": self.suite_hash,
            "status": self.status.value,
            "summary": {
                "total": self.total_tests,
                "succeeded": self.succeeded_tests,
                "failed": self.failed_tests,
                "aborted": self.aborted_tests,
                "errors": self.error_tests,
                "warnings": self.warning_tests,
            },
            "tests": [record.to_dict() for record in self.tests],
        }

    def to_json(self, indent: int = 2) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), indent=indent, default=str)

    def summary(self) -> str:
        """Generate a human-readable summary."""
        lines = [
            f"═══════════════════════════════════════════════════════════",
            f"  Run Report: {self.suite_name}",
            f"═══════════════════════════════════════════════════════════",
            f"  Run ID:     {self.run_id}",
            f"  Status:     {_status_icon(self.status)} {self.status.value.upper()}",
            f"  Duration:   {self.duration_ms:.0f}ms" if self.duration_ms else "  Duration:   N/A",
            f"  Started:    {self.started_at.strftime('%Y-%m-%d %H:%M:%S UTC') if self.started_at else 'N/A'}",
            f"───────────────────────────────────────────────────────────",
            f"  Tests: {self.succeeded_tests} succeeded, {self.failed_tests} failed, "
            f"{self.aborted_tests} aborted, {self.error_tests} errors",
            f"───────────────────────────────────────────────────────────",
        ]

        for record in self.tests:
            icon = _outcome_icon(record.outcome)
            duration = f"{record.duration_ms:.0f}ms" if record.duration_ms else "N/A"
            label = record.title or f"{(record.method or '?').upper()} {record.url or '?'}"
            lines.append(f"  {icon} #{record.number} {label} - {duration}")

            if record.outcome in (Outcome.FAILED, Outcome.ABORTED, Outcome.REQUEST_ERROR):
                lines.append(f"      └─ {record.message}")
            elif record.warning:
                lines.append(f"      └─ {record.warning}")

        lines.append(f"═══════════════════════════════════════════════════════════")
        return "\n".join(lines)


def compute_suite_hash(suite_dict: dict[str, Any]) -> str:
    """
    Compute a hash of the suite for tracking/versioning.

    Returns:
        SHA-256 hash (first 12 chars)
    """
    serialized = canonical_json(suite_dict)
    return hashlib.sha256(serialized.encode()).hexdigest()[:12]


def _safe_serialize(value: Any) -> Any:
    """Safely serialize a value, handling non-JSON types."""
    if value is None:
        return None
    try:
        json.dumps(value)
        return value
    except (TypeError, ValueError):
        return str(value)


def _status_icon(status: RunStatus) -> str:
    """Get icon for run status."""
    return {
        RunStatus.PENDING: "⏳",
        RunStatus.RUNNING: "🔄",
        RunStatus.PASSED: "✅",
        RunStatus.FAILED: "❌",
        RunStatus.ERROR: "⚠️",
    }.get(status, "❓")


def _outcome_icon(outcome: Outcome | None) -> str:
    """Get icon for a test outcome."""
    return {
        Outcome.SUCCEEDED: "✅",
        Outcome.FAILED: "❌",
        Outcome.ABORTED: "⛔",
        Outcome.REQUEST_ERROR: "⚠️",
    }.get(outcome, "❓")
