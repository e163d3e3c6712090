from typing import Optional
from yt_captions.core.errors import VideoInaccessible
from yt_captions.models.caption import PlayabilityStatus

# The platform's reason strings are free text; only these substrings are
# assumed to be stable.
BOT_CHECK_REASON = "not a bot"
AGE_RESTRICTED_REASON = "inappropriate"
UNAVAILABLE_REASON = "unavailable"

def assert_playability(playability: Optional[PlayabilityStatus]) -> None:
    """Raise VideoInaccessible unless the player response says the video can play."""
    status = playability.status if playability else None
    if not status or status == "OK":
        return
    reason = playability.reason or ""
    if status == "LOGIN_REQUIRED":
        if BOT_CHECK_REASON in reason:
            raise VideoInaccessible("request_blocked")
        if AGE_RESTRICTED_REASON in reason:
            raise VideoInaccessible("age_restricted")
    if status == "ERROR" and UNAVAILABLE_REASON in reason:
        raise VideoInaccessible("video_unavailable")
    raise VideoInaccessible("video_unplayable")
