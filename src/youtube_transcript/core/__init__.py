"""Core modules for transcript discovery and retrieval."""

from .config import config, validate_config, proxy_config_from_settings
from .http_client import HttpClient, HttpResponse
from .catalog_source import (
    CatalogSource,
    WatchPageSource,
    InnertubeSource,
    FallbackCatalogSource,
    create_catalog_source
)
from .transcript_api import YouTubeTranscriptApi, build_transcript_list

__all__ = [
    'config',
    'validate_config',
    'proxy_config_from_settings',
    'HttpClient',
    'HttpResponse',
    'CatalogSource',
    'WatchPageSource',
    'InnertubeSource',
    'FallbackCatalogSource',
    'create_catalog_source',
    'YouTubeTranscriptApi',
    'build_transcript_list'
]
