"""
Schema parser for request test suites.

This module converts validated JSON/YAML data into typed Suite structures.
"""

from __future__ import annotations

from typing import Any

from .models import AuthConfig, AuthType, Defaults, Suite, TestDefinition


class SchemaParser:
    """Parses and converts validated data to typed Suite structure."""

    def __init__(self, data: Any, default_name: str = "suite"):
        self.data = data
        self.default_name = default_name

    def parse(self) -> Suite:
        """Convert validated data to typed Suite."""
        # Bare list form: the whole document is the list of tests
        if isinstance(self.data, list):
            return Suite(name=self.default_name, tests=self._parse_tests(self.data))

        return Suite(
            name=self.data.get("name") or self.default_name,
            tests=self._parse_tests(self.data["tests"]),
            env=self.data.get("env") or {},
            defaults=self._parse_defaults(),
            auth=self._parse_auth(self.data.get("auth")),
        )

    def _parse_tests(self, tests: list[dict]) -> list[TestDefinition]:
        return [TestDefinition.from_dict(test) for test in tests]

    def _parse_defaults(self) -> Defaults:
        defaults = self.data.get("defaults") or {}
        return Defaults(
            timeout_ms=defaults.get("timeout_ms", 0),
            headers=defaults.get("headers") or {},
            base_url=defaults.get("base_url"),
        )

    def _parse_auth(self, auth_data: dict | None) -> AuthConfig | None:
        """Parse auth configuration if present."""
        if auth_data is None:
            return None

        return AuthConfig(
            type=AuthType(auth_data["type"]),
            token=auth_data.get("token"),
            header=auth_data.get("header", "X-API-Key"),
            key=auth_data.get("key"),
            username=auth_data.get("username"),
            password=auth_data.get("password"),
        )
