"""
Evaluation result models.

This module defines the outcome of evaluating one test definition,
including what was compared when a comparison happened.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .comparison import Operator


class Outcome(str, Enum):
    """How the evaluation of a test concluded."""
    SUCCEEDED = "succeeded"
    FAILED = "failed"  # response did not satisfy the expectation
    ABORTED = "aborted"  # invalid test definition, no request sent
    REQUEST_ERROR = "request_error"  # the request itself failed


@dataclass
class EvaluationResult:
    """
    Result of evaluating a single test definition.

    Attributes:
        outcome: How the evaluation concluded
        message: Human-readable description of the result
        operator: Operator used for the comparison, when one happened
        expected: Normalized expected value
        actual: Normalized response value
        response: Raw response payload
        warning: Set when the test succeeded without checking anything
        details: Additional context for debugging
    """
    outcome: Outcome
    message: str
    operator: Operator | None = None
    expected: Any = None
    actual: Any = None
    response: Any = None
    warning: str | None = None
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def succeeded(self) -> bool:
        return self.outcome == Outcome.SUCCEEDED

    @property
    def failed(self) -> bool:
        return self.outcome == Outcome.FAILED

    @property
    def exit_code(self) -> int:
        """0 when the test ran to a conclusion, 1 when it could not run."""
        return 1 if self.outcome in (Outcome.ABORTED, Outcome.REQUEST_ERROR) else 0

    def __str__(self) -> str:
        """Format as a human-readable string."""
        if self.outcome == Outcome.SUCCEEDED:
            text = f"✅ SUCCEEDED: {self.message}"
            return f"⚠️ {self.warning}\n{text}" if self.warning else text

        icon = "❌" if self.outcome == Outcome.FAILED else "⚠️"
        lines = [f"{icon} {self.outcome.value.upper()}: {self.message}"]

        if self.outcome == Outcome.FAILED:
            lines.append(f"   Expected: {format_value(self.expected)}")
            lines.append(f"   Actual:   {format_value(self.actual)}")

        for key, value in self.details.items():
            lines.append(f"   {key}: {format_value(value)}")

        return "\n".join(lines)

    @classmethod
    def succeeded_result(
        cls,
        message: str,
        operator: Operator | None = None,
        expected: Any = None,
        actual: Any = None,
        response: Any = None,
        warning: str | None = None,
    ) -> EvaluationResult:
        """Create a successful result."""
        return cls(
            outcome=Outcome.SUCCEEDED,
            message=message,
            operator=operator,
            expected=expected,
            actual=actual,
            response=response,
            warning=warning,
        )

    @classmethod
    def failed_result(
        cls,
        message: str,
        operator: Operator,
        expected: Any,
        actual: Any,
        response: Any = None,
        details: dict[str, Any] | None = None,
    ) -> EvaluationResult:
        """Create a failed-comparison result."""
        return cls(
            outcome=Outcome.FAILED,
            message=message,
            operator=operator,
            expected=expected,
            actual=actual,
            response=response,
            details=details or {},
        )

    @classmethod
    def aborted_result(cls, reason: str) -> EvaluationResult:
        """Create a result for a test that was never sent."""
        return cls(outcome=Outcome.ABORTED, message=reason)

    @classmethod
    def request_error_result(
        cls,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> EvaluationResult:
        """Create a result for a request that failed."""
        return cls(
            outcome=Outcome.REQUEST_ERROR,
            message=message,
            details=details or {},
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "outcome": self.outcome.value,
            "message": self.message,
            "operator": self.operator.value if self.operator else None,
            "expected": self.expected,
            "actual": self.actual,
            "warning": self.warning,
            "exit_code": self.exit_code,
        }


def format_value(value: Any, max_length: int = 200) -> str:
    """Format a value for display, truncating if too long."""
    if value is None:
        return "null"

    if isinstance(value, str):
        formatted = value
    else:
        try:
            formatted = json.dumps(value, ensure_ascii=False, default=str)
        except (TypeError, ValueError):
            formatted = repr(value)

    if len(formatted) > max_length:
        return formatted[: max_length - 3] + "..."

    return formatted
