import pytest

from yt_captions.core.errors import VideoInaccessible
from yt_captions.core.playability import assert_playability
from yt_captions.models.caption import PlayabilityStatus
from yt_captions.models.transcript import ErrorCategory


@pytest.mark.parametrize("status", [None, PlayabilityStatus(), PlayabilityStatus(status="OK"), PlayabilityStatus(status="OK", reason="whatever")])
def test_passes(status):
    assert assert_playability(status) is None


@pytest.mark.parametrize("status,reason,code", [
    ("LOGIN_REQUIRED", "Sign in to confirm you're not a bot", "request_blocked"),
    ("LOGIN_REQUIRED", "not a bot", "request_blocked"),
    ("LOGIN_REQUIRED", "This video may be inappropriate for some users.", "age_restricted"),
    ("LOGIN_REQUIRED", "Sign in", "video_unplayable"),
    ("ERROR", "This video is unavailable", "video_unavailable"),
    ("ERROR", "Something else", "video_unplayable"),
    ("UNPLAYABLE", "unavailable", "video_unplayable"),
    ("LIVE_STREAM_OFFLINE", None, "video_unplayable"),
])
def test_fails(status, reason, code):
    with pytest.raises(VideoInaccessible) as exc_info:
        assert_playability(PlayabilityStatus(status=status, reason=reason))
    assert exc_info.value.code == code
    assert exc_info.value.category == ErrorCategory.INACCESSIBLE
