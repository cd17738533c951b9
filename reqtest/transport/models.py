"""
Transport layer models for HTTP test requests.

This module defines the response structure handed back to the evaluator
and the error raised when a request does not produce one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


class RequestError(Exception):
    """
    An HTTP request failed: connection problem, timeout, or a status
    code the request config does not accept.

    Attributes:
        message: Human-readable description shown in reports
        status: HTTP status when a response was received
        data: Decoded response payload when a response was received
    """

    def __init__(self, message: str, status: int | None = None, data: Any = None):
        super().__init__(message)
        self.message = message
        self.status = status
        self.data = data

    @classmethod
    def from_status(cls, status: int, data: Any = None) -> RequestError:
        return cls(f"Request failed with status code {status}", status=status, data=data)

    @classmethod
    def timeout(cls, timeout_ms: int | float) -> RequestError:
        return cls(f"timeout of {timeout_ms:g}ms exceeded")


@dataclass
class HttpResponse:
    """Represents a completed HTTP exchange."""
    status: int
    data: Any = None
    headers: dict[str, str] = field(default_factory=dict)
    url: str | None = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dict."""
        return {
            "status": self.status,
            "headers": self.headers,
            "data": self.data,
            "url": self.url,
        }
