"""SRT subtitle formatter."""

from typing import Any, Sequence

from ..models import FetchedTranscript
from .base import Formatter


def format_timestamp(seconds: float) -> str:
    """Format seconds as SRT timestamp: HH:MM:SS,mmm."""
    total_millis = int(seconds * 1000)
    total_seconds, millis = divmod(total_millis, 1000)
    minutes, secs = divmod(total_seconds, 60)
    hours, minutes = divmod(minutes, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d},{millis:03d}"


class SRTFormatter(Formatter):
    """Numbered cues with ``start --> end`` timing lines."""

    name = "srt"

    def format_transcript(self, transcript: FetchedTranscript, **options: Any) -> str:
        blocks = []
        for index, segment in enumerate(transcript.segments, start=1):
            start_time = format_timestamp(segment.start)
            end_time = format_timestamp(segment.end)
            blocks.append(f"{index}\n{start_time} --> {end_time}\n{segment.text}\n")
        return "\n".join(blocks)

    def format_transcripts(self, transcripts: Sequence[FetchedTranscript], **options: Any) -> str:
        return "\n\n".join(
            f"WEBVTT - {transcript.video_id} ({transcript.language})\n\n"
            f"{self.format_transcript(transcript)}"
            for transcript in transcripts
        )
