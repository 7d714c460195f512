"""Netscape cookies.txt loading."""

import time
from pathlib import Path
from typing import List, Optional, Union

from .logging import get_logger

logger = get_logger("cookies")

YOUTUBE_COOKIE_DOMAIN = "youtube.com"


def parse_netscape_cookies(
    content: str,
    domain: str = YOUTUBE_COOKIE_DOMAIN,
    now: Optional[float] = None
) -> List[str]:
    """
    Parse Netscape-format cookie lines into ``name=value`` pairs.

    Only cookies whose domain contains ``domain`` and whose expiration lies in
    the future are kept. Comment and blank lines are skipped.
    """
    now = time.time() if now is None else now
    pairs = []

    for line in content.splitlines():
        if line.startswith('#') or not line.strip():
            continue

        parts = line.split('\t')
        if len(parts) < 7:
            continue

        cookie_domain, _, _, _, expiration, name, value = parts[:7]
        try:
            expires_at = int(expiration)
        except ValueError:
            continue

        if domain in cookie_domain and expires_at > int(now):
            pairs.append(f"{name}={value.rstrip()}")

    return pairs


def load_cookie_header(cookie_path: Union[str, Path, None]) -> Optional[str]:
    """
    Build a ``Cookie`` header value from a cookies.txt file.

    Args:
        cookie_path: Path to a Netscape-format cookie file

    Returns:
        Semicolon-joined cookie pairs, or None if nothing usable was found
    """
    if not cookie_path:
        return None

    path = Path(cookie_path)
    if not path.exists():
        logger.warning(f"Cookie file not found: {path}")
        return None

    try:
        content = path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Error loading cookies from {path}: {e}")
        return None

    pairs = parse_netscape_cookies(content)
    if not pairs:
        logger.info(f"No valid {YOUTUBE_COOKIE_DOMAIN} cookies in {path}")
        return None

    logger.debug(f"Loaded {len(pairs)} cookies from {path}")
    return '; '.join(pairs)
