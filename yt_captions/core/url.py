import re
from typing import Optional

VIDEO_ID_PATTERN = re.compile(
    r"(?:https?://)?(?:www\.)?"
    r"(?:youtube\.com/(?:watch\?v=|embed/|v/|live/)|youtu\.be/)"
    r"([\w-]{11})",
    re.ASCII,
)

def extract_video_id(url: str) -> Optional[str]:
    """Return the 11-character video id in ``url``, or None if there is none."""
    if not isinstance(url, str):
        return None
    m = VIDEO_ID_PATTERN.search(url)
    return m.group(1) if m else None
