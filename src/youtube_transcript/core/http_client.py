"""Async HTTP transport for YouTube requests."""

import asyncio
import json
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union
from pathlib import Path

import aiohttp

from ..exceptions import RequestFailedError
from ..proxies import ProxyConfig
from ..utils.cookies import load_cookie_header
from ..utils.logging import get_logger
from .config import config

logger = get_logger("http_client")


@dataclass
class HttpResponse:
    """A fully read HTTP response."""
    status: int
    text: str
    url: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def json(self) -> Any:
        return json.loads(self.text)


def decode_body(raw: bytes, charset: Optional[str] = None) -> str:
    """Decode a response body, replacing bytes that are invalid in its charset."""
    try:
        return raw.decode(charset or 'utf-8', errors='replace')
    except LookupError:
        logger.debug(f"Unknown charset {charset!r}, decoding as utf-8")
        return raw.decode('utf-8', errors='replace')


class HttpClient:
    """
    Thin aiohttp wrapper that attaches the fixed User-Agent, the optional
    cookie header and the proxy matching each request's scheme.
    """

    def __init__(
        self,
        cookie_path: Union[str, Path, None] = None,
        proxy_config: Optional[ProxyConfig] = None,
        user_agent: Optional[str] = None,
        timeout_total: Optional[int] = None,
        timeout_connect: Optional[int] = None
    ):
        self.proxy_config = proxy_config
        self.user_agent = user_agent or config.network.user_agent
        self.cookie_header = load_cookie_header(cookie_path)
        self.timeout_total = timeout_total or config.network.http_timeout_total
        self.timeout_connect = timeout_connect or config.network.http_timeout_connect
        self._session: Optional[aiohttp.ClientSession] = None

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create the HTTP session."""
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(
                total=self.timeout_total,
                connect=self.timeout_connect
            )
            self._session = aiohttp.ClientSession(timeout=timeout)
            logger.debug("Created new HTTP session")

        return self._session

    def build_headers(self, headers: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        """Merge caller headers over the defaults and attach cookies."""
        merged = {'User-Agent': self.user_agent}
        if headers:
            merged.update(headers)
        if self.cookie_header:
            merged['Cookie'] = self.cookie_header
        return merged

    def proxy_for(self, url: str) -> Optional[str]:
        """Pick the proxy URL for the scheme of ``url``."""
        if self.proxy_config is None:
            return None
        return self.proxy_config.proxy_for(url)

    async def fetch(
        self,
        url: str,
        method: str = "GET",
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, str]] = None,
        data: Optional[Union[str, bytes]] = None
    ) -> HttpResponse:
        """
        Perform a request and read the whole body.

        Raises:
            RequestFailedError: On connection-level failures or timeouts
        """
        session = await self._get_session()
        proxy = self.proxy_for(url)
        logger.debug(f"{method} {url}" + (f" via {proxy}" if proxy else ""))

        try:
            async with session.request(
                method,
                url,
                headers=self.build_headers(headers),
                params=params,
                data=data,
                proxy=proxy
            ) as response:
                raw = await response.read()
                body = decode_body(raw, response.charset)
                return HttpResponse(status=response.status, text=body, url=str(response.url))
        except asyncio.TimeoutError as e:
            raise RequestFailedError(url, "request timed out") from e
        except aiohttp.ClientError as e:
            raise RequestFailedError(url, str(e) or e.__class__.__name__) from e

    async def close(self) -> None:
        """Close the HTTP session."""
        if self._session and not self._session.closed:
            await self._session.close()
            logger.debug("Closed HTTP session")
        self._session = None

    async def __aenter__(self) -> "HttpClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
