"""
Timed-text document parsing.

YouTube serves caption tracks in two XML dialects:

- ``<p t="1360" d="1680">text</p>`` (format 3), timings in milliseconds
- ``<text start="1.36" dur="1.68">text</text>`` (legacy), timings in seconds

The first dialect is tried first; the legacy one is used only when the first
produced no matches. Segments keep document order.
"""

import re
from typing import List, Optional, Tuple

from ..models.segment import TranscriptSegment

RE_XML_FORMAT3 = re.compile(r'<p\s+t="(\d+)"\s+d="(\d+)"[^>]*>(.*?)</p>', re.DOTALL)
RE_XML_LEGACY = re.compile(r'<text\s+start="([^"]*)"\s+dur="([^"]*)"[^>]*>(.*?)</text>', re.DOTALL)
RE_TAG = re.compile(r'<[^>]*>')

# &amp; goes last so "&amp;lt;" decodes to a literal "&lt;"
HTML_ENTITIES: Tuple[Tuple[str, str], ...] = (
    ('&lt;', '<'),
    ('&gt;', '>'),
    ('&quot;', '"'),
    ('&#39;', "'"),
    ('&amp;', '&'),
)


def decode_entities(text: str) -> str:
    """Decode the five standard HTML entities."""
    for entity, char in HTML_ENTITIES:
        text = text.replace(entity, char)
    return text


def clean_text(raw: str, preserve_formatting: bool = False) -> str:
    """Decode entities, optionally strip tags, then trim."""
    text = decode_entities(raw)
    if not preserve_formatting:
        text = RE_TAG.sub('', text)
    return text.strip()


def _to_float(value: str) -> Optional[float]:
    try:
        return float(value)
    except ValueError:
        return None


def parse_timed_text(body: str, preserve_formatting: bool = False) -> List[TranscriptSegment]:
    """
    Parse a timed-text document into segments.

    Args:
        body: Raw XML document
        preserve_formatting: Keep tag-like markup inside segment text

    Returns:
        Segments in document order
    """
    matches = RE_XML_FORMAT3.findall(body)
    scale = 1000.0
    if not matches:
        matches = RE_XML_LEGACY.findall(body)
        scale = 1.0

    segments = []
    for start, duration, raw in matches:
        start_value = _to_float(start)
        duration_value = _to_float(duration)
        if start_value is None or duration_value is None:
            continue

        segments.append(TranscriptSegment(
            text=clean_text(raw, preserve_formatting),
            start=start_value / scale,
            duration=duration_value / scale
        ))

    return segments
