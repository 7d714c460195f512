"""Unit tests for the error taxonomy."""

import pytest

from youtube_transcript.exceptions import (
    ApiKeyNotFoundError,
    InvalidVideoIdError,
    IpBlockedError,
    NoTranscriptAvailableError,
    NoTranscriptFoundError,
    NotTranslatableError,
    PoTokenRequiredError,
    RequestFailedError,
    TooManyRequestsError,
    TranscriptFetchError,
    TranscriptsDisabledError,
    TranslationError,
    TranslationLanguageNotAvailableError,
    VideoUnavailableError,
    YouTubeTranscriptError
)

VIDEO_ID = "dQw4w9WgXcQ"


@pytest.mark.unit
class TestErrorCodes:
    """Test codes and hierarchy of each error."""

    @pytest.mark.parametrize("error,code,parents", [
        (InvalidVideoIdError("bad"), "INVALID_VIDEO_ID", ()),
        (TooManyRequestsError(video_id=VIDEO_ID), "TOO_MANY_REQUESTS", ()),
        (IpBlockedError(VIDEO_ID), "IP_BLOCKED", (TooManyRequestsError,)),
        (VideoUnavailableError(VIDEO_ID), "VIDEO_UNAVAILABLE", ()),
        (TranscriptsDisabledError(VIDEO_ID), "TRANSCRIPTS_DISABLED", ()),
        (NoTranscriptAvailableError(VIDEO_ID), "NO_TRANSCRIPT_AVAILABLE", ()),
        (TranscriptFetchError(VIDEO_ID, 500), "TRANSCRIPT_FETCH_FAILED", (NoTranscriptAvailableError,)),
        (PoTokenRequiredError(VIDEO_ID), "PO_TOKEN_REQUIRED", (NoTranscriptAvailableError,)),
        (NoTranscriptFoundError(["de"], VIDEO_ID, ["en"]), "LANGUAGE_NOT_AVAILABLE", ()),
        (NotTranslatableError(VIDEO_ID), "NOT_TRANSLATABLE", (TranslationError,)),
        (TranslationLanguageNotAvailableError("xx", ["de"], VIDEO_ID),
         "TRANSLATION_LANGUAGE_NOT_AVAILABLE", (TranslationError,)),
        (ApiKeyNotFoundError(VIDEO_ID), "API_KEY_NOT_FOUND", ()),
        (RequestFailedError("https://x", "boom"), "REQUEST_FAILED", ()),
    ])
    def test_code_and_hierarchy(self, error, code, parents):
        assert error.error_code == code
        assert isinstance(error, YouTubeTranscriptError)
        for parent in parents:
            assert isinstance(error, parent)


@pytest.mark.unit
class TestErrorMessages:
    """Test rendered messages."""

    def test_prefix(self):
        error = TranscriptsDisabledError(VIDEO_ID)

        assert str(error) == f"[YouTubeTranscript] Transcript is disabled on this video ({VIDEO_ID})"
        assert error.message == error.detail

    def test_no_transcript_found_lists_everything(self):
        error = NoTranscriptFoundError(["de", "fr"], VIDEO_ID, ["en", "es"])

        assert "de, fr" in str(error)
        assert VIDEO_ID in str(error)
        assert "Available languages: en, es" in str(error)

    def test_no_transcript_found_empty_set(self):
        error = NoTranscriptFoundError(["de"], VIDEO_ID, [], kind="manually created transcripts")

        assert "No manually created transcripts found" in str(error)
        assert str(error).endswith("Available languages: none")

    def test_video_unavailable_reason(self):
        error = VideoUnavailableError(VIDEO_ID, "Private video")

        assert error.reason == "Private video"
        assert str(error).endswith(": Private video")

    def test_to_dict(self):
        error = TranscriptFetchError(VIDEO_ID, 403)

        assert error.to_dict() == {
            "code": "TRANSCRIPT_FETCH_FAILED",
            "message": error.detail,
            "video_id": VIDEO_ID
        }
        assert "HTTP 403" in error.detail
