"""
Typed data structures for request test suites.

This module contains all enums and dataclasses that represent
the internal typed structure of a parsed suite.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


# ─────────────────────────────────────────────────────────────────────────────
# Errors
# ─────────────────────────────────────────────────────────────────────────────

class TestDefinitionError(ValueError):
    """A test definition cannot be run as written."""
    __test__ = False


class MissingFieldError(TestDefinitionError):
    """A required field is absent from a test definition."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f'No "{field_name}" field')


class UnknownMethodError(TestDefinitionError):
    """The test names an HTTP verb that is not supported."""

    def __init__(self, value: Any):
        self.value = value
        shown = value.upper() if isinstance(value, str) else value
        super().__init__(f"Unknown Method: {shown}")


class UnknownOperatorError(TestDefinitionError):
    """The test names a comparison operator that is not supported."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Unknown Operator: {value}")


# ─────────────────────────────────────────────────────────────────────────────
# Enums
# ─────────────────────────────────────────────────────────────────────────────

class HttpMethod(str, Enum):
    """HTTP verbs a test may use."""
    GET = "get"
    PUT = "put"
    POST = "post"
    DELETE = "delete"
    PATCH = "patch"

    @classmethod
    def parse(cls, raw: Any) -> HttpMethod:
        """Parse a raw method name, ignoring case."""
        if not isinstance(raw, str):
            raise UnknownMethodError(raw)
        try:
            return cls(raw.lower())
        except ValueError:
            raise UnknownMethodError(raw) from None


class AuthType(str, Enum):
    """Supported authentication types applied to every request of a suite."""
    BEARER = "bearer"
    API_KEY = "api_key"
    BASIC = "basic"


# ─────────────────────────────────────────────────────────────────────────────
# Auth & Defaults
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class AuthConfig:
    """
    Authentication configuration shared by all tests of a suite.

    Supports three auth types:
    - bearer: Uses Authorization: Bearer <token> header
    - api_key: Uses a custom header with the API key
    - basic: Uses Authorization: Basic <base64(user:pass)> header
    """
    type: AuthType
    # For bearer auth
    token: str | None = None
    # For api_key auth
    header: str = "X-API-Key"
    key: str | None = None
    # For basic auth
    username: str | None = None
    password: str | None = None


@dataclass
class Defaults:
    """Client-wide settings applied before per-test options."""
    timeout_ms: int = 0  # 0 means no timeout
    headers: dict[str, Any] = field(default_factory=dict)
    base_url: str | None = None


# ─────────────────────────────────────────────────────────────────────────────
# Tests
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class TestDefinition:
    """
    One HTTP call and an optional expectation about its response.

    ``method`` and ``operator`` are kept as written in the suite file; they
    are parsed into HttpMethod / Operator when the test is evaluated so a
    bad value aborts that test only.
    """
    __test__ = False

    method: Any = None
    url: Any = None
    title: str | None = None
    body: Any = None
    options: dict[str, Any] | None = None
    expect: Any = None
    operator: Any = None

    @property
    def has_body(self) -> bool:
        return self.body is not None

    @property
    def has_expect(self) -> bool:
        return self.expect is not None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TestDefinition:
        return cls(
            method=data.get("method"),
            url=data.get("url"),
            title=data.get("title"),
            body=data.get("body"),
            options=data.get("options"),
            expect=data.get("expect"),
            operator=data.get("operator"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert back to the suite-file form, omitting absent fields."""
        fields = {
            "title": self.title,
            "method": self.method,
            "url": self.url,
            "body": self.body,
            "options": self.options,
            "expect": self.expect,
            "operator": self.operator,
        }
        return {k: v for k, v in fields.items() if v is not None}


# ─────────────────────────────────────────────────────────────────────────────
# Suite
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class Suite:
    """Fully parsed and validated suite."""
    name: str
    tests: list[TestDefinition] = field(default_factory=list)
    env: dict[str, Any] = field(default_factory=dict)
    defaults: Defaults = field(default_factory=Defaults)
    auth: AuthConfig | None = None
