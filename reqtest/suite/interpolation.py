"""
Template interpolation for suite values.

Placeholders of the form ``{{env.NAME}}`` are replaced inside strings,
recursively through dicts and lists. Unknown names are left as written.
"""

from __future__ import annotations

import os
import re
from dataclasses import replace
from typing import Any, Mapping

from .models import AuthConfig, Suite, TestDefinition

ENV_PATTERN = re.compile(r"\{\{env\.(\w+)\}\}")


def build_env(suite_env: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Layer the suite's env block over the process environment."""
    env: dict[str, Any] = dict(os.environ)
    if suite_env:
        env.update(suite_env)
    return env


def interpolate_value(value: Any, env: Mapping[str, Any]) -> Any:
    """Interpolate template variables in a value."""
    if isinstance(value, str):
        def replace_env(match):
            var_name = match.group(1)
            if var_name not in env:
                return match.group(0)
            return str(env[var_name])
        return ENV_PATTERN.sub(replace_env, value)
    elif isinstance(value, dict):
        return {k: interpolate_value(v, env) for k, v in value.items()}
    elif isinstance(value, list):
        return [interpolate_value(v, env) for v in value]
    return value


def interpolate_test(test: TestDefinition, env: Mapping[str, Any]) -> TestDefinition:
    """Return a copy of ``test`` with placeholders resolved."""
    return replace(
        test,
        url=interpolate_value(test.url, env),
        body=interpolate_value(test.body, env),
        options=interpolate_value(test.options, env),
        expect=interpolate_value(test.expect, env),
    )


def interpolate_auth_config(auth: AuthConfig | None, env: Mapping[str, Any]) -> AuthConfig | None:
    """Interpolate environment variables in auth config."""
    if auth is None:
        return None
    return AuthConfig(
        type=auth.type,
        token=interpolate_value(auth.token, env) if auth.token else None,
        header=auth.header,
        key=interpolate_value(auth.key, env) if auth.key else None,
        username=interpolate_value(auth.username, env) if auth.username else None,
        password=interpolate_value(auth.password, env) if auth.password else None,
    )


def interpolate_suite(suite: Suite, env: Mapping[str, Any] | None = None) -> Suite:
    """Resolve placeholders in every test and in the auth block."""
    if env is None:
        env = build_env(suite.env)
    return replace(
        suite,
        tests=[interpolate_test(t, env) for t in suite.tests],
        defaults=replace(
            suite.defaults,
            headers=interpolate_value(suite.defaults.headers, env),
            base_url=interpolate_value(suite.defaults.base_url, env),
        ),
        auth=interpolate_auth_config(suite.auth, env),
    )
