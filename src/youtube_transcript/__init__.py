"""
YouTube Transcript

Async client for discovering, fetching, translating and formatting
YouTube caption tracks.
"""

__version__ = "1.0.2"

from .utils.logging import get_logger
from .exceptions import (
    YouTubeTranscriptError,
    InvalidVideoIdError,
    TooManyRequestsError,
    IpBlockedError,
    VideoUnavailableError,
    TranscriptsDisabledError,
    NoTranscriptAvailableError,
    TranscriptFetchError,
    PoTokenRequiredError,
    NoTranscriptFoundError,
    TranslationError,
    NotTranslatableError,
    TranslationLanguageNotAvailableError,
    ApiKeyNotFoundError,
    RequestFailedError
)
from .models import (
    FetchedTranscript,
    LanguageInfo,
    Transcript,
    TranscriptConfig,
    TranscriptList,
    TranscriptSegment
)
from .proxies import ProxyConfig, GenericProxyConfig, WebshareProxyConfig
from .core import (
    HttpClient,
    HttpResponse,
    CatalogSource,
    WatchPageSource,
    InnertubeSource,
    FallbackCatalogSource,
    YouTubeTranscriptApi
)
from .formatters import Formatter, JSONFormatter, SRTFormatter, TextFormatter, get_formatter
from .utils.youtube_utils import extract_video_id

__all__ = [
    # Logging
    'get_logger',

    # API
    'YouTubeTranscriptApi',
    'HttpClient',
    'HttpResponse',
    'CatalogSource',
    'WatchPageSource',
    'InnertubeSource',
    'FallbackCatalogSource',
    'extract_video_id',

    # Models
    'FetchedTranscript',
    'LanguageInfo',
    'Transcript',
    'TranscriptConfig',
    'TranscriptList',
    'TranscriptSegment',

    # Proxies
    'ProxyConfig',
    'GenericProxyConfig',
    'WebshareProxyConfig',

    # Formatters
    'Formatter',
    'JSONFormatter',
    'SRTFormatter',
    'TextFormatter',
    'get_formatter',

    # Errors
    'YouTubeTranscriptError',
    'InvalidVideoIdError',
    'TooManyRequestsError',
    'IpBlockedError',
    'VideoUnavailableError',
    'TranscriptsDisabledError',
    'NoTranscriptAvailableError',
    'TranscriptFetchError',
    'PoTokenRequiredError',
    'NoTranscriptFoundError',
    'TranslationError',
    'NotTranslatableError',
    'TranslationLanguageNotAvailableError',
    'ApiKeyNotFoundError',
    'RequestFailedError'
]
