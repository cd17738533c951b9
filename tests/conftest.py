"""
Shared fixtures for reqtest tests.

FakeClient stands in for the HTTP client: it records the positional
arguments each verb was called with and replays queued payloads or
exceptions in order.
"""

from __future__ import annotations

import io
from typing import Any

import pytest
from rich.console import Console

from reqtest.transport import BaseClient, HttpResponse


class FakeClient(BaseClient):
    def __init__(self, *replies: Any):
        self.replies = list(replies)
        self.calls: list[tuple[str, tuple]] = []
        self._open = False

    @property
    def is_open(self) -> bool:
        return self._open

    async def open(self) -> None:
        self._open = True

    async def close(self) -> None:
        self._open = False

    async def request(self, method, url, data=None, config=None):
        raise AssertionError("verb methods are overridden")

    async def _reply(self, verb: str, args: tuple) -> HttpResponse:
        self.calls.append((verb, args))
        reply = self.replies.pop(0) if self.replies else None
        if isinstance(reply, Exception):
            raise reply
        return HttpResponse(status=200, data=reply)

    async def get(self, *args):
        return await self._reply("get", args)

    async def put(self, *args):
        return await self._reply("put", args)

    async def post(self, *args):
        return await self._reply("post", args)

    async def delete(self, *args):
        return await self._reply("delete", args)

    async def patch(self, *args):
        return await self._reply("patch", args)


@pytest.fixture
def fake_client():
    return FakeClient


@pytest.fixture
def capture_consoles():
    """Return (out, err) rich consoles writing to StringIO buffers."""
    out = Console(file=io.StringIO(), width=120)
    err = Console(file=io.StringIO(), width=120)
    return out, err

