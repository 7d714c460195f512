"""Unit tests for YouTube page and identifier utilities."""

import pytest

from youtube_transcript.exceptions import InvalidVideoIdError
from youtube_transcript.utils.youtube_utils import (
    create_player_request_body,
    extract_api_key,
    extract_video_id,
    has_captcha_challenge,
    is_video_available,
    parse_captions_from_html
)

from conftest import API_KEY, VIDEO_ID, make_watch_html


@pytest.mark.unit
class TestExtractVideoId:
    """Test video ID resolution."""

    @pytest.mark.parametrize("value", [
        f"https://www.youtube.com/watch?v={VIDEO_ID}",
        f"https://www.youtube.com/watch?feature=share&v={VIDEO_ID}&t=42",
        f"https://youtu.be/{VIDEO_ID}",
        f"https://youtu.be/{VIDEO_ID}?si=abcdef",
        f"https://www.youtube.com/embed/{VIDEO_ID}",
        f"https://www.youtube.com/v/{VIDEO_ID}",
        f"youtube.com/watch?v={VIDEO_ID}",
        f"<a href=\"https://youtu.be/{VIDEO_ID}\">link</a>",
    ])
    def test_url_shapes(self, value):
        """Every known URL shape yields the same 11-character ID."""
        assert extract_video_id(value) == VIDEO_ID

    @pytest.mark.parametrize("value", [
        "dQw4w9WgXcQ",
        "aaaaaaaaaaa",
        "not a video",
        "!!!!!!!!!!!",
    ])
    def test_eleven_characters_is_identity(self, value):
        """Any 11-character input is returned unchanged."""
        assert extract_video_id(value) == value

    @pytest.mark.parametrize("value", [
        "",
        "abc",
        "https://vimeo.com/123456789",
        "https://www.youtube.com/channel/",
    ])
    def test_invalid_input_raises(self, value):
        with pytest.raises(InvalidVideoIdError) as exc_info:
            extract_video_id(value)

        assert exc_info.value.error_code == "INVALID_VIDEO_ID"
        assert "Impossible to retrieve YouTube video ID" in str(exc_info.value)

    def test_none_raises(self):
        with pytest.raises(InvalidVideoIdError):
            extract_video_id(None)


@pytest.mark.unit
class TestPageMarkers:
    """Test watch-page marker detection."""

    def test_captcha_detected(self):
        html = '<form action="/das_captcha"><div class="g-recaptcha" data-sitekey="x"></div></form>'
        assert has_captcha_challenge(html) is True

    def test_captcha_absent(self, watch_html):
        assert has_captcha_challenge(watch_html) is False

    def test_video_available(self, watch_html):
        assert is_video_available(watch_html) is True

    def test_video_unavailable_without_playability(self):
        assert is_video_available("<html><body>nothing here</body></html>") is False

    def test_extract_api_key(self, watch_html):
        assert extract_api_key(watch_html) == API_KEY

    def test_extract_api_key_with_whitespace(self):
        assert extract_api_key('"INNERTUBE_API_KEY": "key_42"') == "key_42"

    def test_extract_api_key_missing(self):
        assert extract_api_key(make_watch_html({}, api_key=None)) is None


@pytest.mark.unit
class TestParseCaptionsFromHtml:
    """Test extraction of the embedded captions blob."""

    def test_parses_renderer(self, watch_html, sample_captions):
        # Act
        captions = parse_captions_from_html(watch_html)

        # Assert
        assert captions == sample_captions
        assert len(captions["captionTracks"]) == 3

    def test_missing_blob_returns_none(self):
        assert parse_captions_from_html(make_watch_html(None)) is None

    def test_unparsable_blob_returns_none(self):
        html = '"playabilityStatus":{},"captions":{"playerCaptionsTracklistRenderer": {broken,"videoDetails":{}'
        assert parse_captions_from_html(html) is None

    def test_newlines_are_stripped(self):
        html = '"captions":{"playerCaptionsTracklistRenderer":\n{"captionTracks":\n[]}},"videoDetails":{}'
        assert parse_captions_from_html(html) == {"captionTracks": []}

    def test_blob_without_renderer_returns_none(self):
        html = '"captions":{"somethingElse":{}},"videoDetails":{}'
        assert parse_captions_from_html(html) is None


@pytest.mark.unit
def test_create_player_request_body():
    body = create_player_request_body(VIDEO_ID, "ANDROID", "20.10.38")

    assert body == {
        "context": {"client": {"clientName": "ANDROID", "clientVersion": "20.10.38"}},
        "videoId": VIDEO_ID
    }
