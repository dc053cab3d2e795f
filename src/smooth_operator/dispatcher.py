"""HTTP request dispatcher - the only place that talks to the server."""

import json
from typing import Any, Optional

import httpx

from .errors import BaseUrlNotSetError, HttpStatusError, ResponseParseError
from .utils.casing import keys_to_camel_case

import logging
logger = logging.getLogger(__name__)


class Dispatcher:
    """
    Issue GET/POST requests against a base URL and normalize the replies.

    Holds nothing between calls except ``base_url`` and ``api_key``. Each
    call opens its own ``httpx.AsyncClient`` so concurrent calls share no
    connection state. ``transport`` is passed through to httpx, which lets
    tests plug in ``httpx.MockTransport``.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url
        self.api_key = api_key
        self._transport = transport

    def _headers(self) -> dict:
        h: dict = {}
        if self.api_key:
            h["Authorization"] = f"Bearer {self.api_key}"
        return h

    def _url(self, path: str) -> str:
        if not self.base_url:
            raise BaseUrlNotSetError()
        # Concatenated verbatim; callers own the leading slash.
        return f"{self.base_url}{path}"

    async def get(self, path: str, timeout: Optional[float] = None) -> Any:
        """``timeout`` (seconds) overrides httpx's default for this request only."""
        url = self._url(path)
        return await self._send("GET", url, headers=self._headers(), timeout=timeout)

    async def post(self, path: str, payload: Any = None) -> Any:
        url = self._url(path)
        body = json.dumps({} if payload is None else payload).encode("utf-8")
        headers = self._headers()
        headers["Content-Type"] = "application/json"
        headers["Content-Length"] = str(len(body))
        return await self._send("POST", url, headers=headers, content=body)

    async def _send(
        self,
        method: str,
        url: str,
        headers: dict,
        content: Optional[bytes] = None,
        timeout: Optional[float] = None,
    ) -> Any:
        extra = {} if timeout is None else {"timeout": timeout}
        async with httpx.AsyncClient(transport=self._transport) as client:
            response = await client.request(method, url, headers=headers, content=content, **extra)

        logger.debug(f"{method} {url} -> {response.status_code}")
        if not 200 <= response.status_code < 300:
            raise HttpStatusError(response.status_code, url)

        try:
            raw = json.loads(response.content)
        except ValueError as e:
            raise ResponseParseError(str(e)) from e
        return keys_to_camel_case(raw)


__all__ = ["Dispatcher"]
