"""
Utility modules for the YouTube transcript client.
"""

from .logging import setup_logger, get_logger
from .cookies import load_cookie_header, parse_netscape_cookies
from .youtube_utils import (
    extract_video_id,
    extract_api_key,
    has_captcha_challenge,
    is_video_available,
    parse_captions_from_html
)

__all__ = [
    'setup_logger',
    'get_logger',
    'load_cookie_header',
    'parse_netscape_cookies',
    'extract_video_id',
    'extract_api_key',
    'has_captcha_challenge',
    'is_video_available',
    'parse_captions_from_html'
]
