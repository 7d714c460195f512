"""Base class for transcript formatters."""

from abc import ABC, abstractmethod
from typing import Any, Sequence

from ..models import FetchedTranscript


class Formatter(ABC):
    """
    Turns fetched transcripts into a string.

    Formatters are stateless; options such as ``indent`` are passed per call.
    """

    name = "base"

    @abstractmethod
    def format_transcript(self, transcript: FetchedTranscript, **options: Any) -> str:
        """Format a single transcript."""

    @abstractmethod
    def format_transcripts(self, transcripts: Sequence[FetchedTranscript], **options: Any) -> str:
        """Format several transcripts into one document."""
