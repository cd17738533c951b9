"""
HTTP transport layer

This package provides the HTTP client the evaluator sends test requests
through.

Usage:
    from reqtest.transport import create_client, AiohttpClient, RequestError

    # Create from a suite
    client = create_client(suite)

    # Or create directly
    client = AiohttpClient(base_url="http://localhost:8000", timeout_ms=5000)

    # Use as async context manager
    async with client:
        try:
            response = await client.post("/items", {"name": "x"}, {"headers": {"X-Trace": "1"}})
            print(response.data)
        except RequestError as e:
            print(e.message)
"""

# Factory
from .factory import create_client

# Client implementations
from .base import BaseClient
from .http import AiohttpClient

# Models
from .models import HttpResponse, RequestError

__all__ = [
    # Factory
    "create_client",
    # Base
    "BaseClient",
    # Implementations
    "AiohttpClient",
    # Models
    "HttpResponse",
    "RequestError",
]
