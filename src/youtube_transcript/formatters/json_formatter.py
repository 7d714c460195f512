"""JSON transcript formatter."""

import json
from typing import Any, Dict, Optional, Sequence

from ..models import FetchedTranscript
from .base import Formatter


class JSONFormatter(Formatter):
    """Serializes segments as ``{text, duration, offset, lang, isGenerated}`` objects."""

    name = "json"

    @staticmethod
    def _dumps(data: Any, indent: Optional[int]) -> str:
        return json.dumps(data, indent=indent, ensure_ascii=False)

    def format_transcript(self, transcript: FetchedTranscript, indent: Optional[int] = None, **options: Any) -> str:
        return self._dumps(transcript.to_raw_data(), indent)

    def format_transcripts(
        self,
        transcripts: Sequence[FetchedTranscript],
        indent: Optional[int] = None,
        **options: Any
    ) -> str:
        data = [self._wrap(transcript) for transcript in transcripts]
        return self._dumps(data, indent)

    @staticmethod
    def _wrap(transcript: FetchedTranscript) -> Dict[str, Any]:
        return {
            "videoId": transcript.video_id,
            "language": transcript.language,
            "languageCode": transcript.language_code,
            "isGenerated": transcript.is_generated,
            "transcript": transcript.to_raw_data()
        }
