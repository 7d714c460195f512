"""Proxy configurations.

A proxy configuration only produces URLs; the HTTP client decides which one to
apply based on the scheme of each outgoing request.
"""

from abc import ABC, abstractmethod
from typing import Optional


class ProxyConfig(ABC):
    """Base interface for proxy configurations."""

    @abstractmethod
    def get_http_proxy_url(self) -> Optional[str]:
        """Proxy URL for plain HTTP requests."""

    @abstractmethod
    def get_https_proxy_url(self) -> Optional[str]:
        """Proxy URL for HTTPS requests."""

    def proxy_for(self, url: str) -> Optional[str]:
        """Return the proxy URL matching the scheme of ``url``."""
        if url.lower().startswith('https'):
            return self.get_https_proxy_url()
        return self.get_http_proxy_url()


class GenericProxyConfig(ProxyConfig):
    """Echoes caller-supplied proxy URLs."""

    def __init__(self, http_url: Optional[str] = None, https_url: Optional[str] = None):
        self.http_url = http_url
        self.https_url = https_url

    def get_http_proxy_url(self) -> Optional[str]:
        return self.http_url

    def get_https_proxy_url(self) -> Optional[str]:
        return self.https_url


class WebshareProxyConfig(ProxyConfig):
    """Rotating residential proxies from Webshare."""

    WEBSHARE_PROXY_HOST = 'p.webshare.io'
    WEBSHARE_PROXY_PORT = '80'
    WEBSHARE_PROXY_HTTPS_PORT = '443'

    def __init__(self, proxy_username: str, proxy_password: str):
        self.proxy_username = proxy_username
        self.proxy_password = proxy_password

    def _url(self, port: str) -> str:
        return f"http://{self.proxy_username}:{self.proxy_password}@{self.WEBSHARE_PROXY_HOST}:{port}"

    def get_http_proxy_url(self) -> str:
        return self._url(self.WEBSHARE_PROXY_PORT)

    def get_https_proxy_url(self) -> str:
        return self._url(self.WEBSHARE_PROXY_HTTPS_PORT)
