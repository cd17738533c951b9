"""
Base client interface for HTTP test requests.

This module defines the abstract base class that all HTTP clients
must follow. The per-verb methods use the axios calling convention:
``get`` and ``delete`` take ``(url, config)``, while ``post``, ``put``
and ``patch`` take ``(url, data, config)``. Every verb also accepts a
third positional so callers can use a single ``(url, second, third)``
shape for all of them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from ..suite.models import HttpMethod

if TYPE_CHECKING:
    from .models import HttpResponse


class BaseClient(ABC):
    """
    Abstract base class for HTTP clients.

    Subclasses implement ``request``; the verb methods only map their
    positional arguments onto it.
    """

    @abstractmethod
    async def open(self) -> None:
        """Acquire any resources (sessions, connection pools)."""
        pass

    @abstractmethod
    async def close(self) -> None:
        """Release resources acquired by open()."""
        pass

    @abstractmethod
    async def request(
        self,
        method: HttpMethod,
        url: str,
        data: Any = None,
        config: dict[str, Any] | None = None,
    ) -> HttpResponse:
        """
        Perform one HTTP request.

        Args:
            method: HTTP verb
            url: Target URL (joined with ``config['baseURL']`` when relative)
            data: Request payload; dicts and lists are sent as JSON
            config: Request options (headers, params, timeout, ...)

        Returns:
            HttpResponse with the decoded payload in ``data``

        Raises:
            RequestError: if no acceptable response was received
        """
        pass

    async def get(self, url: str, config: dict[str, Any] | None = None, _extra: Any = None) -> HttpResponse:
        return await self.request(HttpMethod.GET, url, config=config)

    async def delete(self, url: str, config: dict[str, Any] | None = None, _extra: Any = None) -> HttpResponse:
        return await self.request(HttpMethod.DELETE, url, config=config)

    async def post(self, url: str, data: Any = None, config: dict[str, Any] | None = None) -> HttpResponse:
        return await self.request(HttpMethod.POST, url, data=data, config=config)

    async def put(self, url: str, data: Any = None, config: dict[str, Any] | None = None) -> HttpResponse:
        return await self.request(HttpMethod.PUT, url, data=data, config=config)

    async def patch(self, url: str, data: Any = None, config: dict[str, Any] | None = None) -> HttpResponse:
        return await self.request(HttpMethod.PATCH, url, data=data, config=config)

    @property
    @abstractmethod
    def is_open(self) -> bool:
        """Return True if the client can send requests."""
        pass

    async def __aenter__(self) -> BaseClient:
        """Async context manager entry."""
        await self.open()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()
