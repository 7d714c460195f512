"""Pytest configuration and shared fixtures for transcript tests."""

import json
import os
import sys
from typing import Any, Dict
from unittest.mock import AsyncMock, Mock

import pytest

# Add the src directory to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src')))

from youtube_transcript.core.http_client import HttpResponse

VIDEO_ID = "dQw4w9WgXcQ"
API_KEY = "AIzaSyTestKey_123-abc"
BASE_URL = f"https://www.youtube.com/api/timedtext?v={VIDEO_ID}&ei=abc&caps=asr&opi=1"

FORMAT3_XML = (
    '<?xml version="1.0" encoding="utf-8" ?><timedtext format="3"><body>'
    '<p t="0" d="2500">Never gonna give you up</p>'
    '<p t="2500" d="1500">Never gonna &amp; let you down</p>'
    '</body></timedtext>'
)

LEGACY_XML = (
    '<?xml version="1.0" encoding="utf-8" ?><transcript>'
    '<text start="1.36" dur="1.68">Hello &#39;world&#39;</text>'
    '<text start="3.04" dur="2.0">Second line</text>'
    '</transcript>'
)


def make_response(status: int = 200, text: str = "", url: str = "") -> HttpResponse:
    """Build a fully read HTTP response."""
    return HttpResponse(status=status, text=text, url=url)


def make_watch_html(captions: Dict[str, Any] = None, api_key: str = API_KEY) -> str:
    """Build a minimal watch page embedding a player response."""
    parts = [
        '<html><head><script>var ytcfg = {',
        f'"INNERTUBE_API_KEY":"{api_key}",' if api_key else '',
        '"INNERTUBE_CONTEXT_CLIENT_NAME":1};</script></head><body><script>',
        'var ytInitialPlayerResponse = {"responseContext":{},',
        '"playabilityStatus":{"status":"OK"},',
    ]
    if captions is not None:
        parts.append(f'"captions":{json.dumps({"playerCaptionsTracklistRenderer": captions})},')
    parts.append('"videoDetails":{"videoId":"' + VIDEO_ID + '","title":"Test"}};</script></body></html>')
    return "".join(parts)


@pytest.fixture
def video_id() -> str:
    return VIDEO_ID


@pytest.fixture
def sample_captions() -> Dict[str, Any]:
    """Captions descriptor with a manual, a generated and a French track."""
    return {
        "captionTracks": [
            {
                "baseUrl": f"{BASE_URL}&lang=en",
                "name": {"simpleText": "English"},
                "vssId": ".en",
                "languageCode": "en",
                "isTranslatable": True
            },
            {
                "baseUrl": f"{BASE_URL}&kind=asr&lang=en",
                "name": {"runs": [{"text": "English (auto-generated)"}]},
                "vssId": "a.en",
                "languageCode": "en",
                "kind": "asr",
                "isTranslatable": True
            },
            {
                "baseUrl": f"{BASE_URL}&lang=fr",
                "name": {"simpleText": "French"},
                "vssId": ".fr",
                "languageCode": "fr",
                "isTranslatable": False
            }
        ],
        "translationLanguages": [
            {"languageCode": "de", "languageName": {"simpleText": "German"}},
            {"languageCode": "es", "languageName": {"runs": [{"text": "Spanish"}]}},
            {"languageCode": "ja"}
        ]
    }


@pytest.fixture
def watch_html(sample_captions) -> str:
    return make_watch_html(sample_captions)


@pytest.fixture
def player_response(sample_captions) -> Dict[str, Any]:
    """Innertube player endpoint payload."""
    return {
        "playabilityStatus": {"status": "OK"},
        "captions": {"playerCaptionsTracklistRenderer": sample_captions},
        "videoDetails": {"videoId": VIDEO_ID}
    }


@pytest.fixture
def mock_http_client():
    """Mock HTTP client; tests set ``fetch.return_value`` or ``fetch.side_effect``."""
    client = Mock()
    client.fetch = AsyncMock(return_value=make_response(text=FORMAT3_XML))
    client.close = AsyncMock()
    return client
