"""
aiohttp-backed HTTP client for request tests.

This module implements BaseClient on top of a single aiohttp session
that is shared by every test of a run. Request options follow the
axios config names so suites written for axios keep working:
- headers: extra request headers (merged over client defaults)
- params: query string parameters
- timeout: total timeout in milliseconds, 0 for none
- auth: {username, password} for HTTP basic auth
- baseURL: prefix for relative URLs
- data: request payload for get/delete
- validateStatus: false to accept any status code
"""

from __future__ import annotations

import asyncio
import base64
import json
import logging
from typing import Any, TYPE_CHECKING

import aiohttp

from ..suite.models import HttpMethod
from .base import BaseClient
from .models import HttpResponse, RequestError

if TYPE_CHECKING:
    from ..suite.models import AuthConfig

logger = logging.getLogger(__name__)

AUTHORIZATION = "Authorization"
USER_AGENT = "User-Agent"
DEFAULT_USER_AGENT = "reqtest"


class AiohttpClient(BaseClient):
    """
    HTTP client using aiohttp.

    One ClientSession is created by open() and reused until close().
    Non-2xx responses raise RequestError unless the request config sets
    ``validateStatus: false``.
    """

    def __init__(
        self,
        base_url: str | None = None,
        headers: dict[str, Any] | None = None,
        timeout_ms: int = 0,
        auth_config: "AuthConfig | None" = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: Prefix for relative test URLs
            headers: Headers sent with every request
            timeout_ms: Default total timeout in milliseconds, 0 for none
            auth_config: Optional suite-wide authentication
        """
        self.base_url = base_url
        self.default_headers = {k: str(v) for k, v in (headers or {}).items()}
        self.timeout_ms = timeout_ms
        self._auth_config = auth_config
        self._session: aiohttp.ClientSession | None = None

    @property
    def is_open(self) -> bool:
        return self._session is not None and not self._session.closed

    async def open(self) -> None:
        """Create the HTTP session."""
        if self._session is None:
            self._session = aiohttp.ClientSession()

    async def close(self) -> None:
        """Close the HTTP session."""
        if self._session:
            await self._session.close()
            self._session = None

    def _build_headers(self, extra: dict[str, Any] | None) -> dict[str, str]:
        """Build request headers: defaults, then suite auth, then per-test headers."""
        headers = {USER_AGENT: DEFAULT_USER_AGENT}
        headers.update(self.default_headers)
        self._apply_auth_headers(headers)
        if isinstance(extra, dict):
            headers.update({k: str(v) for k, v in extra.items()})
        return headers

    def _apply_auth_headers(self, headers: dict[str, str]) -> None:
        """Apply authentication headers based on auth config."""
        if self._auth_config is None:
            return

        auth_type = self._auth_config.type.value

        if auth_type == "bearer":
            token = self._auth_config.token
            if token:
                headers[AUTHORIZATION] = f"Bearer {token}"
                logger.debug("Applied bearer auth header")

        elif auth_type == "api_key":
            key = self._auth_config.key
            header_name = self._auth_config.header or "X-API-Key"
            if key:
                headers[header_name] = key
                logger.debug(f"Applied API key auth header: {header_name}")

        elif auth_type == "basic":
            username = self._auth_config.username
            password = self._auth_config.password
            if username and password:
                credentials = base64.b64encode(
                    f"{username}:{password}".encode()
                ).decode("ascii")
                headers[AUTHORIZATION] = f"Basic {credentials}"
                logger.debug("Applied basic auth header")

    def _resolve_url(self, url: str, base_url: str | None) -> str:
        """Prefix relative URLs with the base URL."""
        if not base_url or url.startswith("http://") or url.startswith("https://"):
            return url
        return f"{base_url.rstrip('/')}/{url.lstrip('/')}"

    async def request(
        self,
        method: HttpMethod,
        url: str,
        data: Any = None,
        config: dict[str, Any] | None = None,
    ) -> HttpResponse:
        """
        Send a request and decode the response payload.

        Args:
            method: HTTP verb
            url: Target URL
            data: Request payload
            config: axios-style request options

        Returns:
            HttpResponse with the decoded payload

        Raises:
            RequestError: on connection failure, timeout, or rejected status
        """
        if not self.is_open:
            raise RequestError("Client not open. Call open() first.")

        if config is not None and not isinstance(config, dict):
            # get/delete receive a test's body in the config slot; non-objects are ignored
            logger.debug(f"Ignoring non-object request config: {type(config).__name__}")
            config = None
        config = config or {}
        full_url = self._resolve_url(url, config.get("baseURL") or self.base_url)
        headers = self._build_headers(config.get("headers"))

        timeout_ms = config.get("timeout", self.timeout_ms) or 0
        timeout = aiohttp.ClientTimeout(total=timeout_ms / 1000 if timeout_ms else None)

        if data is None and method in (HttpMethod.GET, HttpMethod.DELETE):
            data = config.get("data")

        kwargs: dict[str, Any] = {}
        if data is not None:
            if isinstance(data, (str, bytes)):
                kwargs["data"] = data
            else:
                kwargs["json"] = data

        params = config.get("params")
        if isinstance(params, dict) and params:
            kwargs["params"] = _stringify_params(params)

        auth = config.get("auth")
        if isinstance(auth, dict):
            # aiohttp refuses an explicit Authorization header alongside auth=
            headers.pop(AUTHORIZATION, None)
            kwargs["auth"] = aiohttp.BasicAuth(
                str(auth.get("username", "")), str(auth.get("password", ""))
            )

        logger.debug(f"{method.value.upper()} {full_url}")

        try:
            async with self._session.request(
                method.value.upper(),
                full_url,
                headers=headers,
                timeout=timeout,
                **kwargs,
            ) as resp:
                body = await resp.read()
                response = HttpResponse(
                    status=resp.status,
                    data=_decode_payload(body, resp.charset),
                    headers=dict(resp.headers),
                    url=str(resp.url),
                )

        except asyncio.TimeoutError:
            raise RequestError.timeout(timeout_ms) from None
        except aiohttp.ClientError as e:
            raise RequestError(str(e) or type(e).__name__) from e

        logger.debug(f"{method.value.upper()} {full_url} -> {response.status}")

        if config.get("validateStatus", True) is not False and not response.ok:
            raise RequestError.from_status(response.status, data=response.data)

        return response

    def __repr__(self) -> str:
        status = "open" if self.is_open else "closed"
        return f"AiohttpClient(base_url={self.base_url!r}, status={status})"


def _decode_payload(body: bytes, charset: str | None) -> Any:
    """Decode JSON bodies; anything else is returned as text."""
    text = body.decode(charset or "utf-8", errors="replace")
    if not text:
        return text
    try:
        return json.loads(text)
    except ValueError:
        return text


def _stringify_params(params: dict[str, Any]) -> dict[str, str]:
    """aiohttp only accepts str/int/float query values."""
    result = {}
    for key, value in params.items():
        if isinstance(value, bool):
            result[key] = "true" if value else "false"
        elif isinstance(value, (dict, list)):
            result[key] = json.dumps(value)
        else:
            result[key] = str(value)
    return result
