"""YouTube transcript API: catalog listing and transcript fetching."""

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..exceptions import NoTranscriptAvailableError, YouTubeTranscriptError
from ..models import FetchedTranscript, LanguageInfo, Transcript, TranscriptConfig, TranscriptList
from ..proxies import ProxyConfig
from ..utils.logging import get_logger
from ..utils.youtube_utils import extract_video_id
from .catalog_source import CatalogSource, create_catalog_source
from .config import config, proxy_config_from_settings
from .http_client import HttpClient

logger = get_logger("transcript_api")


def get_display_name(entry: Dict[str, Any], key: str, fallback: str) -> str:
    """
    Read a display name that may be a plain string or a rich-text run list.

    ``{"simpleText": "English"}`` and ``{"runs": [{"text": "English"}]}`` both
    yield ``"English"``; anything else yields ``fallback``.
    """
    name = entry.get(key)
    if isinstance(name, dict):
        if name.get('simpleText'):
            return name['simpleText']
        runs = name.get('runs') or []
        if runs and runs[0].get('text'):
            return runs[0]['text']
    return fallback


def _translation_languages(entries: List[Dict[str, Any]]) -> List[LanguageInfo]:
    languages = []
    for entry in entries:
        code = entry.get('languageCode')
        if not code:
            continue
        languages.append(LanguageInfo(
            language_code=code,
            language_name=get_display_name(entry, 'languageName', code)
        ))
    return languages


def build_transcript_list(
    video_id: str,
    captions: Dict[str, Any],
    http_client: Optional[HttpClient] = None
) -> TranscriptList:
    """
    Build a TranscriptList from a captions descriptor.

    Track-local ``translationLanguages`` take precedence over the global list
    carried next to ``captionTracks``.
    """
    global_translations = _translation_languages(captions.get('translationLanguages') or [])

    transcripts = []
    for track in captions.get('captionTracks') or []:
        code = track['languageCode']
        local_entries = track.get('translationLanguages')
        translations = (
            _translation_languages(local_entries) if local_entries is not None else global_translations
        )

        transcripts.append(Transcript(
            video_id=video_id,
            language=get_display_name(track, 'name', code),
            language_code=code,
            is_generated=track.get('kind') == 'asr',
            is_translatable=bool(track.get('isTranslatable')),
            translation_languages=tuple(translations),
            base_url=track['baseUrl'],
            http_client=http_client
        ))

    logger.info(f"Found {len(transcripts)} transcripts for {video_id}")
    return TranscriptList(transcripts, video_id)


class YouTubeTranscriptApi:
    """
    Entry point for listing and fetching YouTube transcripts.

    Example:
        async with YouTubeTranscriptApi() as api:
            transcript = await api.fetch("dQw4w9WgXcQ", TranscriptConfig(languages=["de", "en"]))
            print(transcript.text)
    """

    def __init__(
        self,
        cookie_path: Union[str, Path, None] = None,
        proxy_config: Optional[ProxyConfig] = None,
        catalog_source: Union[str, CatalogSource, None] = None,
        http_client: Optional[HttpClient] = None
    ):
        if http_client is None:
            http_client = HttpClient(
                cookie_path=cookie_path or config.youtube.cookies_path,
                proxy_config=proxy_config or proxy_config_from_settings()
            )
        self.http_client = http_client

        if isinstance(catalog_source, CatalogSource):
            self.catalog_source = catalog_source
        else:
            self.catalog_source = create_catalog_source(http_client, catalog_source)

        logger.debug(f"Initialized YouTubeTranscriptApi with {self.catalog_source.name} catalog source")

    async def list(self, video_id: str) -> TranscriptList:
        """
        List the transcripts available for a video.

        Args:
            video_id: Video ID or any supported YouTube URL

        Returns:
            TranscriptList of the video's caption tracks

        Raises:
            YouTubeTranscriptError: Typed failure; unexpected errors surface as
                NoTranscriptAvailableError
        """
        video_id = extract_video_id(video_id)

        try:
            captions = await self.catalog_source.fetch_captions(video_id)
            return build_transcript_list(video_id, captions, self.http_client)
        except YouTubeTranscriptError:
            raise
        except Exception as e:
            logger.error(f"Unexpected error listing transcripts for {video_id}: {str(e)}")
            raise NoTranscriptAvailableError(video_id) from e

    async def fetch(
        self,
        video_id: str,
        transcript_config: Optional[TranscriptConfig] = None
    ) -> FetchedTranscript:
        """
        Fetch the best transcript for the preferred languages.

        Args:
            video_id: Video ID or any supported YouTube URL
            transcript_config: Language preferences and formatting options

        Returns:
            FetchedTranscript for the first preferred language available
        """
        transcript_config = transcript_config or TranscriptConfig(
            preserve_formatting=config.transcript.preserve_formatting
        )
        languages = transcript_config.resolve_languages(config.transcript.default_languages)

        transcript_list = await self.list(video_id)
        transcript = transcript_list.find_transcript(languages)
        return await transcript.fetch(preserve_formatting=transcript_config.preserve_formatting)

    @classmethod
    async def fetch_transcript(
        cls,
        video_id: str,
        transcript_config: Optional[TranscriptConfig] = None
    ) -> List[Dict[str, Any]]:
        """Fetch a transcript with a throwaway client and return its raw segment data."""
        async with cls() as api:
            fetched = await api.fetch(video_id, transcript_config)
        return fetched.to_raw_data()

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self.http_client.close()

    async def __aenter__(self) -> "YouTubeTranscriptApi":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
