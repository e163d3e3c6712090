from typing import Optional
from yt_captions.models.transcript import ErrorCategory, ErrorRecord

class TranscriptError(Exception):
    """Base for every failure the transcript pipeline classifies.

    ``code`` is the stable machine-readable label callers dispatch on
    (``ip_blocked``, ``video_unavailable``, ...).
    """
    category = ErrorCategory.OTHER_ERROR

    def __init__(self, code: str):
        self.code = code
        super().__init__(code)

class InvalidVideoUrl(TranscriptError):
    category = ErrorCategory.INVALID_URL

    def __init__(self, code: str = "unable_to_extract_video_id"):
        super().__init__(code)

class VideoInaccessible(TranscriptError):
    category = ErrorCategory.INACCESSIBLE

class NoCaptionsFound(TranscriptError):
    category = ErrorCategory.NO_CAPTIONS

class YouTubeRequestFailed(TranscriptError):
    category = ErrorCategory.NETWORK_ERROR

    def __init__(self, code: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(code)

    @classmethod
    def from_status(cls, status_code: int) -> "YouTubeRequestFailed":
        return cls(f"yt_request_failed_{status_code}", status_code)

class IpBlocked(YouTubeRequestFailed):
    def __init__(self):
        super().__init__("ip_blocked", 429)

def classify_error(exc: BaseException) -> ErrorRecord:
    if isinstance(exc, TranscriptError):
        return ErrorRecord(category=exc.category, message=exc.code)
    return ErrorRecord(category=ErrorCategory.OTHER_ERROR, message=str(exc) or "unexpected_error")
