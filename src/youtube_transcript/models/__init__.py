"""Data models for YouTube transcripts."""

from .segment import TranscriptSegment
from .transcript import (
    FetchedTranscript,
    LanguageInfo,
    Transcript,
    TranscriptConfig,
    TranscriptList
)

__all__ = [
    "TranscriptSegment",
    "FetchedTranscript",
    "LanguageInfo",
    "Transcript",
    "TranscriptConfig",
    "TranscriptList"
]
