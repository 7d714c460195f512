"""Data models for transcript catalogs, handles and fetched transcripts."""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple

from ..exceptions import (
    NoTranscriptFoundError,
    NotTranslatableError,
    PoTokenRequiredError,
    RequestFailedError,
    TranscriptFetchError,
    TranslationLanguageNotAvailableError
)
from ..utils.logging import get_logger
from .segment import TranscriptSegment

logger = get_logger("transcript")

PO_TOKEN_MARKER = "&exp=xpe"


@dataclass(frozen=True)
class LanguageInfo:
    """A language a transcript exists in or can be translated to."""
    language_code: str
    language_name: str


@dataclass
class TranscriptConfig:
    """
    Options for a fetch call.

    ``languages`` wins over the legacy single ``lang`` field, which wins over
    the configured default list.
    """
    languages: Optional[List[str]] = None
    lang: Optional[str] = None
    preserve_formatting: bool = False

    def resolve_languages(self, default: Optional[Sequence[str]] = None) -> List[str]:
        """Return the effective ordered language preference list."""
        if self.languages:
            return list(self.languages)
        if self.lang:
            return [self.lang]
        return list(default) if default else ['en']


@dataclass(frozen=True)
class FetchedTranscript:
    """A transcript whose timed segments have been retrieved."""
    segments: Tuple[TranscriptSegment, ...]
    video_id: str
    language: str
    language_code: str
    is_generated: bool

    @property
    def text(self) -> str:
        """Get plain text transcript with all segments joined."""
        return " ".join(segment.text for segment in self.segments)

    def to_raw_data(self) -> List[Dict[str, Any]]:
        """Convert to the serializable segment list (start time is exposed as ``offset``)."""
        return [
            {
                "text": segment.text,
                "duration": segment.duration,
                "offset": segment.start,
                "lang": self.language_code,
                "isGenerated": self.is_generated
            }
            for segment in self.segments
        ]

    def __iter__(self) -> Iterator[TranscriptSegment]:
        return iter(self.segments)

    def __len__(self) -> int:
        return len(self.segments)

    def __getitem__(self, index):
        return self.segments[index]


@dataclass(frozen=True)
class Transcript:
    """
    Handle to one caption track of a video.

    Handles are immutable: ``translate`` returns a new handle and leaves the
    original untouched. ``fetch`` retrieves and parses the timed-text document
    through the shared HTTP client.
    """
    video_id: str
    language: str
    language_code: str
    is_generated: bool
    is_translatable: bool
    translation_languages: Tuple[LanguageInfo, ...]
    base_url: str
    http_client: Any = field(default=None, repr=False, compare=False)

    async def fetch(self, preserve_formatting: bool = False) -> FetchedTranscript:
        """
        Fetch the timed segments of this transcript.

        Args:
            preserve_formatting: Keep markup inside segment text

        Returns:
            FetchedTranscript with segments in document order

        Raises:
            PoTokenRequiredError: If the track URL needs a PO token
            TranscriptFetchError: If the document cannot be retrieved
        """
        if PO_TOKEN_MARKER in self.base_url:
            raise PoTokenRequiredError(self.video_id)

        try:
            response = await self.http_client.fetch(
                self.base_url,
                headers={'Accept-Language': self.language_code}
            )
        except RequestFailedError as e:
            logger.error(f"Timed-text request failed for {self.video_id}: {e.reason}")
            raise TranscriptFetchError(self.video_id) from e

        if not response.ok:
            raise TranscriptFetchError(self.video_id, response.status)

        # Import here to avoid circular imports
        from ..utils.timedtext import parse_timed_text

        segments = parse_timed_text(response.text, preserve_formatting=preserve_formatting)
        logger.debug(f"Parsed {len(segments)} segments for {self.video_id} ({self.language_code})")

        return FetchedTranscript(
            segments=tuple(segments),
            video_id=self.video_id,
            language=self.language,
            language_code=self.language_code,
            is_generated=self.is_generated
        )

    def translate(self, language_code: str) -> "Transcript":
        """
        Derive a handle for this transcript machine-translated to ``language_code``.

        Raises:
            NotTranslatableError: If the track cannot be translated
            TranslationLanguageNotAvailableError: If the target is not offered
        """
        if not self.is_translatable:
            raise NotTranslatableError(self.video_id)

        target = next(
            (lang for lang in self.translation_languages if lang.language_code == language_code),
            None
        )
        if target is None:
            raise TranslationLanguageNotAvailableError(
                language_code,
                [lang.language_code for lang in self.translation_languages],
                self.video_id
            )

        return Transcript(
            video_id=self.video_id,
            language=target.language_name or language_code,
            language_code=language_code,
            is_generated=self.is_generated,
            is_translatable=False,
            translation_languages=(),
            base_url=f"{self.base_url}&tlang={language_code}",
            http_client=self.http_client
        )


class TranscriptList:
    """Ordered, read-only catalog of the transcripts available for one video."""

    def __init__(self, transcripts: Sequence[Transcript], video_id: str):
        self._transcripts: Tuple[Transcript, ...] = tuple(transcripts)
        self.video_id = video_id

    @property
    def transcripts(self) -> List[Transcript]:
        """Get all transcripts."""
        return list(self._transcripts)

    def find_transcript(self, language_codes: Sequence[str]) -> Transcript:
        """
        Find a transcript in the given languages, manual or generated.

        Language codes are tried in order; the first code present wins.
        """
        return self._find(language_codes, None)

    def find_manually_created_transcript(self, language_codes: Sequence[str]) -> Transcript:
        """Find a manually created transcript in the given languages."""
        return self._find(language_codes, False)

    def find_generated_transcript(self, language_codes: Sequence[str]) -> Transcript:
        """Find an automatically generated transcript in the given languages."""
        return self._find(language_codes, True)

    def _find(self, language_codes: Sequence[str], generated: Optional[bool]) -> Transcript:
        candidates = [
            t for t in self._transcripts
            if generated is None or t.is_generated == generated
        ]

        for language_code in language_codes:
            for transcript in candidates:
                if transcript.language_code == language_code:
                    return transcript

        kind = {
            None: "transcripts",
            False: "manually created transcripts",
            True: "automatically generated transcripts",
        }[generated]
        available = list(dict.fromkeys(t.language_code for t in candidates))
        raise NoTranscriptFoundError(language_codes, self.video_id, available, kind=kind)

    def __iter__(self) -> Iterator[Transcript]:
        return iter(self._transcripts)

    def __len__(self) -> int:
        return len(self._transcripts)

    def __repr__(self) -> str:
        codes = ", ".join(
            f"{t.language_code}{' (generated)' if t.is_generated else ''}"
            for t in self._transcripts
        )
        return f"TranscriptList(video_id={self.video_id!r}, transcripts=[{codes}])"
