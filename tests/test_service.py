from unittest.mock import MagicMock

import pytest

from yt_captions.core.video import VideoSource
from yt_captions.models.transcript import ErrorCategory, ErrorRecord, TranscriptResult, TranscriptSegment
from yt_captions.services.transcript import TranscriptService


def source_returning(result):
    source = MagicMock(spec=VideoSource)
    source.get_transcript.return_value = result
    return source


@pytest.mark.parametrize("url", [None, "", "   "])
def test_missing_url_is_400_without_lookup(url):
    source = source_returning(TranscriptResult())
    assert TranscriptService(source).respond(url) == (400, {"message": "Video URL is required"})
    source.get_transcript.assert_not_called()


def test_success_joins_segment_text():
    result = TranscriptResult(
        video_id="dQw4w9WgXcQ",
        segments=[TranscriptSegment(text="hello", start_in_ms=0, duration=1), TranscriptSegment(text="world", start_in_ms=5, duration=1)],
    )
    source = source_returning(result)
    status, payload = TranscriptService(source).respond(" https://youtu.be/dQw4w9WgXcQ ", ["en"])
    assert (status, payload) == (200, {"transcription": "hello world"})
    source.get_transcript.assert_called_once_with("https://youtu.be/dQw4w9WgXcQ", ["en"])


def test_default_languages_come_from_settings(monkeypatch):
    from yt_captions.config import settings

    monkeypatch.setattr(settings, "TRANSCRIPT_LANGS", "pt, en,")
    source = source_returning(TranscriptResult())
    TranscriptService(source).respond("https://youtu.be/dQw4w9WgXcQ")
    source.get_transcript.assert_called_once_with("https://youtu.be/dQw4w9WgXcQ", ["pt", "en"])


@pytest.mark.parametrize("category,message", [
    (ErrorCategory.NO_CAPTIONS, "no_caption_tracks_found"),
    (ErrorCategory.INACCESSIBLE, "video_unavailable"),
    (ErrorCategory.NETWORK_ERROR, "ip_blocked"),
])
def test_failure_is_404_with_category(category, message):
    result = TranscriptResult.failure(ErrorRecord(category=category, message=message))
    status, payload = TranscriptService(source_returning(result)).respond("https://youtu.be/dQw4w9WgXcQ")
    assert status == 404
    assert payload == {"message": "No transcript available.", "reason": message, "category": category.value}


def test_empty_result_without_error_is_404():
    status, payload = TranscriptService(source_returning(TranscriptResult())).respond("https://youtu.be/dQw4w9WgXcQ")
    assert status == 404
    assert payload["category"] is None


def test_lookup_returns_pipeline_result():
    result = TranscriptResult.failure(ErrorRecord(category=ErrorCategory.INVALID_URL, message="unable_to_extract_video_id"))
    source = source_returning(result)
    assert TranscriptService(source).lookup(" nope ", ["en"]) is result
    source.get_transcript.assert_called_once_with("nope", ["en"])


def test_cli_goes_through_service(monkeypatch, capsys):
    from yt_captions import cli

    result = TranscriptResult(
        video_id="dQw4w9WgXcQ",
        language="en",
        segments=[TranscriptSegment(text="hello there", start_in_ms=0, duration=1)],
    )
    source = source_returning(result)
    monkeypatch.setattr(cli, "TranscriptService", lambda: TranscriptService(source))
    monkeypatch.setattr("sys.argv", ["yt-captions", "https://youtu.be/dQw4w9WgXcQ", "--lang", "de,en"])
    cli.main()
    source.get_transcript.assert_called_once_with("https://youtu.be/dQw4w9WgXcQ", ["de", "en"])
    assert "hello there" in capsys.readouterr().out


def test_cli_failure_exits_1(monkeypatch):
    from yt_captions import cli

    result = TranscriptResult.failure(ErrorRecord(category=ErrorCategory.NO_CAPTIONS, message="no_caption_tracks_found"))
    monkeypatch.setattr(cli, "TranscriptService", lambda: TranscriptService(source_returning(result)))
    monkeypatch.setattr("sys.argv", ["yt-captions", "https://youtu.be/dQw4w9WgXcQ"])
    with pytest.raises(SystemExit) as exc_info:
        cli.main()
    assert exc_info.value.code == 1
