"""Custom exceptions for transcript discovery and retrieval."""

from typing import Any, Dict, Iterable, List, Optional


class YouTubeTranscriptError(Exception):
    """Base transcript exception class."""

    def __init__(
        self,
        detail: str,
        error_code: str = "TRANSCRIPT_ERROR",
        video_id: Optional[str] = None
    ):
        self.detail = detail
        self.message = detail  # Alias for compatibility
        self.error_code = error_code
        self.video_id = video_id
        super().__init__(f"[YouTubeTranscript] {detail}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to a serializable dictionary."""
        return {
            "code": self.error_code,
            "message": self.detail,
            "video_id": self.video_id
        }


class InvalidVideoIdError(YouTubeTranscriptError):
    """Raised when a video identifier cannot be resolved from the input."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(
            detail=f"Impossible to retrieve YouTube video ID from '{value}'",
            error_code="INVALID_VIDEO_ID"
        )


class TooManyRequestsError(YouTubeTranscriptError):
    """YouTube wants a captcha solved before serving this IP again."""

    def __init__(
        self,
        detail: str = (
            "YouTube is receiving too many requests from this IP and now requires "
            "solving a captcha to continue"
        ),
        error_code: str = "TOO_MANY_REQUESTS",
        video_id: Optional[str] = None
    ):
        super().__init__(detail=detail, error_code=error_code, video_id=video_id)


class IpBlockedError(TooManyRequestsError):
    """The watch page answered with HTTP 429."""

    def __init__(self, video_id: Optional[str] = None):
        super().__init__(
            detail="Your IP has been blocked by YouTube",
            error_code="IP_BLOCKED",
            video_id=video_id
        )


class VideoUnavailableError(YouTubeTranscriptError):
    """The video is no longer available."""

    def __init__(self, video_id: str, reason: Optional[str] = None):
        self.reason = reason
        detail = f"The video is no longer available ({video_id})"
        if reason:
            detail = f"{detail}: {reason}"
        super().__init__(detail=detail, error_code="VIDEO_UNAVAILABLE", video_id=video_id)


class TranscriptsDisabledError(YouTubeTranscriptError):
    """Captions are disabled for the video."""

    def __init__(self, video_id: str):
        super().__init__(
            detail=f"Transcript is disabled on this video ({video_id})",
            error_code="TRANSCRIPTS_DISABLED",
            video_id=video_id
        )


class NoTranscriptAvailableError(YouTubeTranscriptError):
    """No transcripts are available for the video."""

    def __init__(
        self,
        video_id: str,
        detail: Optional[str] = None,
        error_code: str = "NO_TRANSCRIPT_AVAILABLE"
    ):
        super().__init__(
            detail=detail or f"No transcripts are available for this video ({video_id})",
            error_code=error_code,
            video_id=video_id
        )


class TranscriptFetchError(NoTranscriptAvailableError):
    """The timed-text document could not be retrieved."""

    def __init__(self, video_id: str, status: Optional[int] = None):
        self.status = status
        detail = f"No transcripts are available for this video ({video_id})"
        if status is not None:
            detail = f"{detail}: timed-text request returned HTTP {status}"
        super().__init__(video_id, detail=detail, error_code="TRANSCRIPT_FETCH_FAILED")


class PoTokenRequiredError(NoTranscriptAvailableError):
    """The caption URL requires a proof-of-origin token."""

    def __init__(self, video_id: str):
        super().__init__(
            video_id,
            detail=(
                f"No transcripts are available for this video ({video_id}): "
                "the caption track requires a PO token"
            ),
            error_code="PO_TOKEN_REQUIRED"
        )


class NoTranscriptFoundError(YouTubeTranscriptError):
    """None of the requested languages is available."""

    def __init__(
        self,
        requested_languages: Iterable[str],
        video_id: str,
        available_languages: Iterable[str],
        kind: str = "transcripts"
    ):
        self.requested_languages: List[str] = list(requested_languages)
        self.available_languages: List[str] = list(available_languages)
        super().__init__(
            detail=(
                f"No {kind} found in languages: {', '.join(self.requested_languages)} "
                f"for video {video_id}. "
                f"Available languages: {', '.join(self.available_languages) or 'none'}"
            ),
            error_code="LANGUAGE_NOT_AVAILABLE",
            video_id=video_id
        )


class TranslationError(YouTubeTranscriptError):
    """Base class for translation failures."""

    def __init__(
        self,
        detail: str,
        error_code: str = "TRANSLATION_ERROR",
        video_id: Optional[str] = None
    ):
        super().__init__(detail=detail, error_code=error_code, video_id=video_id)


class NotTranslatableError(TranslationError):
    """The transcript cannot be translated at all."""

    def __init__(self, video_id: Optional[str] = None):
        super().__init__(
            detail="This transcript cannot be translated",
            error_code="NOT_TRANSLATABLE",
            video_id=video_id
        )


class TranslationLanguageNotAvailableError(TranslationError):
    """The transcript cannot be translated into the requested language."""

    def __init__(
        self,
        language_code: str,
        available_languages: Iterable[str],
        video_id: Optional[str] = None
    ):
        self.language_code = language_code
        self.available_languages: List[str] = list(available_languages)
        super().__init__(
            detail=(
                f"This transcript cannot be translated to {language_code}. "
                f"Available languages: {', '.join(self.available_languages) or 'none'}"
            ),
            error_code="TRANSLATION_LANGUAGE_NOT_AVAILABLE",
            video_id=video_id
        )


class ApiKeyNotFoundError(YouTubeTranscriptError):
    """The watch page did not embed an innertube API key."""

    def __init__(self, video_id: str):
        super().__init__(
            detail=f"Could not extract YouTube API key ({video_id})",
            error_code="API_KEY_NOT_FOUND",
            video_id=video_id
        )


class RequestFailedError(YouTubeTranscriptError):
    """A request failed below the HTTP status level."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(
            detail=f"Request to {url} failed: {reason}",
            error_code="REQUEST_FAILED"
        )
