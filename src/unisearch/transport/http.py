"""HTTP transport — generic request executor shared by all adapters.

Each call opens its own ``httpx.AsyncClient`` so that concurrent searches never
share connections. Failures are translated into adapter exceptions:

  - non-2xx responses and network errors → ``TransportError``
  - exceeded timeouts → ``TimeoutError``
  - undecodable JSON → ``ParseError``
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Literal

import httpx

from unisearch.exceptions import ParseError, TimeoutError, TransportError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 15.0

HttpMethod = Literal["GET", "POST", "PUT", "DELETE", "PATCH"]


def _error_detail(body: Any) -> str:
    """Extract a readable message from a parsed error body."""
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict) and isinstance(error.get("message"), str):
            return error["message"]
        if isinstance(body.get("message"), str):
            return body["message"]
        return json.dumps(body)
    if isinstance(body, str):
        return body
    return json.dumps(body)


class HttpTransport:
    """Stateless async HTTP executor.

    Args:
        transport: Optional ``httpx`` transport, e.g. ``httpx.MockTransport`` in tests.
        headers: Default headers sent with every request.
    """

    def __init__(
        self,
        transport: httpx.AsyncBaseTransport | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        self._transport = transport
        self._headers = {"Accept": "application/json", **(headers or {})}

    async def request(
        self,
        url: str,
        *,
        method: HttpMethod = "GET",
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        json_body: Any = None,
        timeout: float | None = None,
        parse: Literal["json", "text"] = "json",
    ) -> Any:
        """Execute one HTTP request.

        Args:
            url: Absolute request URL.
            method: HTTP method.
            params: Query parameters; ``None`` values are dropped.
            headers: Extra headers, overriding the defaults.
            json_body: Body serialized as JSON (ignored for GET).
            timeout: Deadline in seconds for the whole call, connect through
                body read (default: 15s).
            parse: ``"json"`` to decode the body, ``"text"`` to return it raw.

        Returns:
            The decoded JSON payload, or the response text.

        Raises:
            TransportError: On a non-2xx status or a network failure.
            TimeoutError: When the request exceeds ``timeout``.
            ParseError: When a JSON body cannot be decoded.
        """
        effective_timeout = timeout or DEFAULT_TIMEOUT
        query = {k: v for k, v in (params or {}).items() if v is not None}
        body = json_body if method != "GET" else None

        try:
            async with asyncio.timeout(effective_timeout):
                async with httpx.AsyncClient(
                    transport=self._transport,
                    headers=self._headers,
                    timeout=effective_timeout,
                    follow_redirects=True,
                ) as client:
                    response = await client.request(
                        method,
                        url,
                        params=query or None,
                        headers=headers,
                        json=body,
                    )
        except (httpx.TimeoutException, asyncio.TimeoutError) as e:
            raise TimeoutError(f"Request timed out after {effective_timeout:g}s", timeout=effective_timeout) from e
        except httpx.RequestError as e:
            raise TransportError(f"Request failed: {e}") from e

        if not response.is_success:
            raise self._status_error(response)

        if parse == "text":
            return response.text
        try:
            return response.json()
        except ValueError as e:
            raise ParseError(f"Invalid JSON response from {response.url.host}: {e}") from e

    async def get(self, url: str, **kwargs: Any) -> Any:
        return await self.request(url, method="GET", **kwargs)

    async def post(self, url: str, json_body: Any, **kwargs: Any) -> Any:
        return await self.request(url, method="POST", json_body=json_body, **kwargs)

    @staticmethod
    def _status_error(response: httpx.Response) -> TransportError:
        error = TransportError(
            f"Request failed with status: {response.status_code} {response.reason_phrase}",
            status_code=response.status_code,
            response_text=response.text,
        )
        if error.body:
            error.args = (f"{error.args[0]} - {_error_detail(error.body)}",)
        logger.debug("HTTP %d from %s", response.status_code, response.url)
        return error
