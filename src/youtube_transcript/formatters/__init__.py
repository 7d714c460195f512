"""Output formatters for fetched transcripts."""

from typing import Dict, Type

from .base import Formatter
from .json_formatter import JSONFormatter
from .srt_formatter import SRTFormatter, format_timestamp
from .text_formatter import TextFormatter

FORMATTERS: Dict[str, Type[Formatter]] = {
    JSONFormatter.name: JSONFormatter,
    TextFormatter.name: TextFormatter,
    SRTFormatter.name: SRTFormatter,
}


def get_formatter(name: str) -> Formatter:
    """Get a formatter by name, falling back to plain text for unknown names."""
    formatter_class = FORMATTERS.get((name or "").lower(), TextFormatter)
    return formatter_class()


__all__ = [
    'Formatter',
    'JSONFormatter',
    'SRTFormatter',
    'TextFormatter',
    'FORMATTERS',
    'format_timestamp',
    'get_formatter'
]
