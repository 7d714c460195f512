"""Utility functions for working with YouTube pages and identifiers."""

import json
import re
from typing import Any, Dict, Optional

from ..exceptions import InvalidVideoIdError
from .logging import get_logger

logger = get_logger("youtube_utils")

# watch?v=, youtu.be/, /embed/, /v/ and /e/ shapes; 11 characters up to a terminator
RE_YOUTUBE = re.compile(
    r'(?:youtube\.com/(?:[^/]+/.+/|(?:v|e(?:mbed)?)/|.*[?&]v=)|youtu\.be/)([^"&?/\s]{11})',
    re.IGNORECASE
)
RE_API_KEY = re.compile(r'"INNERTUBE_API_KEY":\s*"([a-zA-Z0-9_-]+)"')

CAPTCHA_MARKER = 'class="g-recaptcha"'
PLAYABILITY_MARKER = '"playabilityStatus":'
CAPTIONS_MARKER = '"captions":'
VIDEO_DETAILS_MARKER = ',"videoDetails'


def extract_video_id(value: str) -> str:
    """
    Resolve a video ID from a bare ID or a YouTube URL.

    Any 11-character input is returned unchanged; YouTube rejects bad IDs later.

    Args:
        value: YouTube URL or video ID

    Returns:
        The 11-character video ID

    Raises:
        InvalidVideoIdError: If no ID can be found
    """
    if value is None:
        raise InvalidVideoIdError("None")

    if len(value) == 11:
        return value

    match = RE_YOUTUBE.search(value)
    if match:
        return match.group(1)

    logger.warning(f"Could not extract video ID from: {value}")
    raise InvalidVideoIdError(value)


def has_captcha_challenge(html: str) -> bool:
    """Check if the page is a reCAPTCHA interstitial."""
    return CAPTCHA_MARKER in html


def is_video_available(html: str) -> bool:
    """Check if the page carries a playability status at all."""
    return PLAYABILITY_MARKER in html


def extract_api_key(html: str) -> Optional[str]:
    """Extract the innertube API key embedded in a watch page."""
    match = RE_API_KEY.search(html)
    return match.group(1) if match else None


def parse_captions_from_html(html: str) -> Optional[Dict[str, Any]]:
    """
    Parse the captions renderer embedded in a watch page.

    Returns:
        The ``playerCaptionsTracklistRenderer`` object, or None when the blob is
        missing or cannot be decoded
    """
    parts = html.split(CAPTIONS_MARKER)
    if len(parts) <= 1:
        return None

    captions_json = parts[1].split(VIDEO_DETAILS_MARKER)[0].replace('\n', '')
    try:
        parsed = json.loads(captions_json)
    except ValueError:
        logger.debug("Captions blob found but could not be decoded")
        return None

    if not isinstance(parsed, dict):
        return None
    return parsed.get('playerCaptionsTracklistRenderer')


def create_player_request_body(video_id: str, client_name: str, client_version: str) -> Dict[str, Any]:
    """Create the request body for the innertube player endpoint."""
    return {
        "context": {
            "client": {
                "clientName": client_name,
                "clientVersion": client_version
            }
        },
        "videoId": video_id
    }
