"""
Client factory for creating HTTP clients from suite configuration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .base import BaseClient
from .http import AiohttpClient

if TYPE_CHECKING:
    from ..suite import Suite


def create_client(suite: Suite, timeout_ms: int | None = None) -> BaseClient:
    """
    Create an HTTP client from a suite's defaults and auth block.

    Args:
        suite: A parsed (and usually interpolated) suite
        timeout_ms: Override for ``defaults.timeout_ms``

    Returns:
        An unopened client; use it as an async context manager

    Example:
        suite, _ = load_suite("parameters.json")
        async with create_client(suite) as client:
            response = await client.get("http://localhost:8000/health")
    """
    return AiohttpClient(
        base_url=suite.defaults.base_url,
        headers=suite.defaults.headers,
        timeout_ms=suite.defaults.timeout_ms if timeout_ms is None else timeout_ms,
        auth_config=suite.auth,
    )
