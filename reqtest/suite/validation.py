"""
Schema validation for request test suites.

This module checks raw parsed JSON/YAML against the suite layout and
reports errors with helpful messages. Only the shape of the file is
checked here: a bad method or operator is not a file error, it aborts
that single test when the suite runs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .models import AuthType


# ─────────────────────────────────────────────────────────────────────────────
# Validation Result Types
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class ValidationError:
    """Represents a single validation error with context."""
    path: str  # e.g., "tests[0].options"
    message: str
    value: Any = None
    suggestion: str | None = None

    def __str__(self) -> str:
        parts = [f"❌ {self.path}: {self.message}"]
        if self.value is not None:
            parts.append(f"   Got: {repr(self.value)}")
        if self.suggestion:
            parts.append(f"   💡 {self.suggestion}")
        return "\n".join(parts)


@dataclass
class ValidationResult:
    """Result of schema validation."""
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def add_error(
        self,
        path: str,
        message: str,
        value: Any = None,
        suggestion: str | None = None
    ) -> None:
        self.errors.append(ValidationError(path, message, value, suggestion))

    def __str__(self) -> str:
        if self.is_valid:
            return "✅ Schema validation passed"
        lines = [f"Schema validation failed with {len(self.errors)} error(s):\n"]
        lines.extend(str(e) for e in self.errors)
        return "\n".join(lines)


# ─────────────────────────────────────────────────────────────────────────────
# Schema Validator
# ─────────────────────────────────────────────────────────────────────────────

class SchemaValidator:
    """Validates raw parsed JSON/YAML against the suite layout."""

    REQUIRED_TOP_LEVEL = {"tests"}
    OPTIONAL_TOP_LEVEL = {"name", "env", "defaults", "auth"}
    VALID_AUTH_TYPES = {t.value for t in AuthType}

    def __init__(self, data: Any):
        self.data = data
        self.result = ValidationResult()

    def validate(self) -> ValidationResult:
        """Run all validation checks and return result."""
        if isinstance(self.data, list):
            self._validate_tests(self.data, "tests")
            return self.result

        if not isinstance(self.data, dict):
            self.result.add_error(
                "suite",
                "Must be a list of tests or an object with a 'tests' list",
                value=type(self.data).__name__
            )
            return self.result

        self._validate_top_level()
        if not self.result.is_valid:
            return self.result

        self._validate_name()
        self._validate_env()
        self._validate_defaults()
        auth = self.data.get("auth")
        if auth is not None:
            self._validate_auth(auth)
        self._validate_tests(self.data.get("tests"), "tests")

        return self.result

    def _validate_top_level(self) -> None:
        """Check required and unknown top-level keys."""
        keys = set(self.data.keys())
        missing = self.REQUIRED_TOP_LEVEL - keys
        unknown = keys - self.REQUIRED_TOP_LEVEL - self.OPTIONAL_TOP_LEVEL

        for key in missing:
            self.result.add_error(
                key,
                f"Required field '{key}' is missing",
                suggestion=f"Add '{key}:' to your suite file"
            )

        for key in unknown:
            self.result.add_error(
                key,
                f"Unknown top-level field '{key}'",
                suggestion=f"Valid fields are: {', '.join(sorted(self.REQUIRED_TOP_LEVEL | self.OPTIONAL_TOP_LEVEL))}"
            )

    def _validate_name(self) -> None:
        name = self.data.get("name")
        if name is None:
            return
        if not isinstance(name, str):
            self.result.add_error(
                "name",
                "Must be a string",
                value=name
            )
        elif not name.strip():
            self.result.add_error(
                "name",
                "Cannot be empty",
                suggestion="Provide a descriptive name or remove the field"
            )

    def _validate_env(self) -> None:
        env = self.data.get("env")
        if env is None:
            return
        if not isinstance(env, dict):
            self.result.add_error(
                "env",
                "Must be an object (key-value pairs)",
                value=env
            )

    def _validate_defaults(self) -> None:
        defaults = self.data.get("defaults")
        if defaults is None:
            return
        if not isinstance(defaults, dict):
            self.result.add_error(
                "defaults",
                "Must be an object",
                value=defaults
            )
            return

        timeout = defaults.get("timeout_ms")
        if timeout is not None:
            if isinstance(timeout, bool) or not isinstance(timeout, int) or timeout < 0:
                self.result.add_error(
                    "defaults.timeout_ms",
                    "Must be a non-negative integer (milliseconds)",
                    value=timeout
                )

        headers = defaults.get("headers")
        if headers is not None and not isinstance(headers, dict):
            self.result.add_error(
                "defaults.headers",
                "Must be an object (header name to value)",
                value=headers
            )

        base_url = defaults.get("base_url")
        if base_url is not None:
            if not isinstance(base_url, str):
                self.result.add_error(
                    "defaults.base_url",
                    "Must be a string",
                    value=base_url
                )
            elif not (base_url.startswith("http://") or base_url.startswith("https://")):
                self.result.add_error(
                    "defaults.base_url",
                    "Must be a valid HTTP(S) URL",
                    value=base_url,
                    suggestion="URL should start with 'http://' or 'https://'"
                )

    def _validate_tests(self, tests: Any, path: str) -> None:
        if not isinstance(tests, list):
            self.result.add_error(
                path,
                "Must be a list",
                value=tests
            )
            return

        if len(tests) == 0:
            self.result.add_error(
                path,
                "Must contain at least one test",
                suggestion="Add a test such as {method: get, url: 'http://...'}"
            )
            return

        for i, test in enumerate(tests):
            self._validate_test(f"{path}[{i}]", test)

    def _validate_test(self, path: str, test: Any) -> None:
        if not isinstance(test, dict):
            self.result.add_error(
                path,
                "Test must be an object",
                value=test
            )
            return

        title = test.get("title")
        if title is not None and not isinstance(title, str):
            self.result.add_error(
                f"{path}.title",
                "Title must be a string",
                value=title
            )

        url = test.get("url")
        if url is not None and not isinstance(url, str):
            self.result.add_error(
                f"{path}.url",
                "URL must be a string",
                value=url
            )

        options = test.get("options")
        if options is not None and not isinstance(options, dict):
            self.result.add_error(
                f"{path}.options",
                "Options must be an object",
                value=options,
                suggestion="Use request options such as {headers: {...}, timeout: 5000}"
            )

    def _validate_auth(self, auth: Any) -> None:
        """Validate suite-wide auth configuration."""
        if not isinstance(auth, dict):
            self.result.add_error(
                "auth",
                "Must be an object",
                value=auth
            )
            return

        auth_type = auth.get("type")
        if auth_type not in self.VALID_AUTH_TYPES:
            self.result.add_error(
                "auth.type",
                "Invalid auth type",
                value=auth_type,
                suggestion=f"Valid types: {', '.join(sorted(self.VALID_AUTH_TYPES))}"
            )
            return

        if auth_type == "bearer":
            self._require_string(auth, "token", "Required for bearer auth",
                                 "Add 'token: \"your-token\"' or 'token: \"{{env.TOKEN}}\"'")

        elif auth_type == "api_key":
            self._require_string(auth, "key", "Required for api_key auth",
                                 "Add 'key: \"your-api-key\"' or 'key: \"{{env.API_KEY}}\"'")
            header = auth.get("header")
            if header is not None and not isinstance(header, str):
                self.result.add_error(
                    "auth.header",
                    "Must be a string",
                    value=header,
                    suggestion="Default is 'X-API-Key'"
                )

        elif auth_type == "basic":
            self._require_string(auth, "username", "Required for basic auth",
                                 "Add 'username: \"user\"' or 'username: \"{{env.USER}}\"'")
            self._require_string(auth, "password", "Required for basic auth",
                                 "Add 'password: \"pass\"' or 'password: \"{{env.PASS}}\"'")

    def _require_string(self, auth: dict, key: str, message: str, suggestion: str) -> None:
        value = auth.get(key)
        if not value:
            self.result.add_error(f"auth.{key}", message, suggestion=suggestion)
        elif not isinstance(value, str):
            self.result.add_error(f"auth.{key}", "Must be a string", value=value)
