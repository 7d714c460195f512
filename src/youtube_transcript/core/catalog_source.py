"""
Caption descriptor discovery.

YouTube has exposed caption tracks in two ways over time:

- embedded in the watch page HTML as a ``"captions":`` JSON blob
- through the innertube player endpoint, keyed by an API key scraped from the
  watch page

Both strategies implement :class:`CatalogSource` and return the same shape: the
``playerCaptionsTracklistRenderer`` object holding ``captionTracks`` and,
optionally, a global ``translationLanguages`` list.
"""

import json
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Tuple, Type

from ..exceptions import (
    ApiKeyNotFoundError,
    IpBlockedError,
    NoTranscriptAvailableError,
    TooManyRequestsError,
    TranscriptsDisabledError,
    VideoUnavailableError,
    YouTubeTranscriptError
)
from ..utils.logging import get_logger
from ..utils.youtube_utils import (
    create_player_request_body,
    extract_api_key,
    has_captcha_challenge,
    is_video_available,
    parse_captions_from_html
)
from .config import config
from .http_client import HttpClient

logger = get_logger("catalog_source")

BOT_CHALLENGE_REASON = "not a bot"


class CatalogSource(ABC):
    """Locates the captions descriptor for a video."""

    name = "base"

    def __init__(self, http_client: HttpClient):
        self.http_client = http_client

    async def fetch_captions(self, video_id: str) -> Dict[str, Any]:
        """Return the captions descriptor or raise a typed error."""
        html = await self._fetch_watch_page(video_id)
        return await self.captions_from_page(video_id, html)

    @abstractmethod
    async def captions_from_page(self, video_id: str, html: str) -> Dict[str, Any]:
        """Locate the captions descriptor starting from an already fetched watch page."""

    async def _fetch_watch_page(self, video_id: str) -> str:
        """Fetch the watch page and reject challenge or unavailable pages."""
        response = await self.http_client.fetch(config.youtube.watch_url.format(video_id=video_id))
        if response.status == 429:
            raise IpBlockedError(video_id)

        html = response.text
        if has_captcha_challenge(html):
            raise TooManyRequestsError(video_id=video_id)
        if not is_video_available(html):
            raise VideoUnavailableError(video_id)
        return html


class WatchPageSource(CatalogSource):
    """Scrapes the captions blob embedded in the watch page."""

    name = "watch_page"

    async def captions_from_page(self, video_id: str, html: str) -> Dict[str, Any]:
        captions = parse_captions_from_html(html)
        if captions is None:
            raise TranscriptsDisabledError(video_id)
        if 'captionTracks' not in captions:
            raise NoTranscriptAvailableError(video_id)

        logger.debug(f"Found captions blob in watch page for {video_id}")
        return captions


class InnertubeSource(CatalogSource):
    """Queries the innertube player endpoint with the page's API key."""

    name = "innertube"

    def __init__(
        self,
        http_client: HttpClient,
        client_name: Optional[str] = None,
        client_version: Optional[str] = None
    ):
        super().__init__(http_client)
        self.client_name = client_name or config.youtube.client_name
        self.client_version = client_version or config.youtube.client_version

    async def captions_from_page(self, video_id: str, html: str) -> Dict[str, Any]:
        api_key = extract_api_key(html)
        if not api_key:
            raise ApiKeyNotFoundError(video_id)

        body = create_player_request_body(video_id, self.client_name, self.client_version)
        response = await self.http_client.fetch(
            config.youtube.player_api_url,
            method="POST",
            headers={'Content-Type': 'application/json'},
            params={'key': api_key},
            data=json.dumps(body)
        )
        if not response.ok:
            logger.warning(f"Player endpoint returned HTTP {response.status} for {video_id}")
            raise NoTranscriptAvailableError(video_id)

        try:
            player_data = response.json()
        except ValueError:
            raise NoTranscriptAvailableError(video_id)

        return self.extract_captions(player_data, video_id)

    @staticmethod
    def extract_captions(player_data: Dict[str, Any], video_id: str) -> Dict[str, Any]:
        """
        Pull the captions renderer out of a player response.

        Any non-OK playability status without a recognised reason is reported
        as an unavailable video.
        """
        playability = player_data.get('playabilityStatus') or {}
        if playability.get('status') != 'OK':
            reason = playability.get('reason') or ''
            if BOT_CHALLENGE_REASON in reason:
                raise TooManyRequestsError(video_id=video_id)
            raise VideoUnavailableError(video_id, reason or None)

        captions = (player_data.get('captions') or {}).get('playerCaptionsTracklistRenderer')
        if not captions or 'captionTracks' not in captions:
            raise TranscriptsDisabledError(video_id)

        return captions


class FallbackCatalogSource(CatalogSource):
    """
    Tries a primary strategy and falls back to a secondary one on specific errors.

    The watch page is fetched once and handed to both strategies.
    """

    name = "auto"

    FALLBACK_ERRORS: Tuple[Type[YouTubeTranscriptError], ...] = (
        TranscriptsDisabledError,
        NoTranscriptAvailableError,
        ApiKeyNotFoundError,
    )

    def __init__(self, primary: CatalogSource, secondary: CatalogSource):
        super().__init__(primary.http_client)
        self.primary = primary
        self.secondary = secondary

    async def captions_from_page(self, video_id: str, html: str) -> Dict[str, Any]:
        try:
            return await self.primary.captions_from_page(video_id, html)
        except self.FALLBACK_ERRORS as e:
            logger.warning(
                f"{self.primary.name} source failed for {video_id} ({e.error_code}), "
                f"trying {self.secondary.name}"
            )
            return await self.secondary.captions_from_page(video_id, html)


def create_catalog_source(http_client: HttpClient, name: Optional[str] = None) -> CatalogSource:
    """
    Create a catalog source by name.

    Args:
        http_client: Shared HTTP client
        name: 'innertube', 'watch_page' or 'auto' (defaults to the configured source)
    """
    name = (name or config.transcript.catalog_source).lower()
    if name == InnertubeSource.name:
        return InnertubeSource(http_client)
    if name == WatchPageSource.name:
        return WatchPageSource(http_client)
    if name == FallbackCatalogSource.name:
        return FallbackCatalogSource(InnertubeSource(http_client), WatchPageSource(http_client))
    raise ValueError(f"Unsupported catalog source: {name}")
