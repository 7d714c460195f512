"""Plain text transcript formatter."""

from typing import Any, Sequence

from ..models import FetchedTranscript
from .base import Formatter


class TextFormatter(Formatter):
    """Joins segment texts with single spaces."""

    name = "text"

    def format_transcript(self, transcript: FetchedTranscript, **options: Any) -> str:
        return transcript.text

    def format_transcripts(self, transcripts: Sequence[FetchedTranscript], **options: Any) -> str:
        return "\n\n".join(
            f"[{transcript.video_id} - {transcript.language}]\n{self.format_transcript(transcript)}"
            for transcript in transcripts
        )
