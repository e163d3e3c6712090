from typing import Any, Dict, List, Optional, Tuple
from yt_captions.config import settings
from yt_captions.core.video import VideoSource
from yt_captions.models.transcript import TranscriptResult
from yt_captions.providers.youtube import YouTubeProvider
from yt_captions.utils.logger import logger

class TranscriptService:
    """Maps a transcript lookup onto an HTTP-style (status, JSON payload) pair.

    A missing URL is rejected with 400 before any request is made. Any failed
    or empty lookup is a 404 that echoes the error category and message.
    """

    def __init__(self, source: Optional[VideoSource] = None):
        self.source = source or YouTubeProvider()

    def lookup(self, video_url: str, preferred_languages: Optional[List[str]] = None) -> TranscriptResult:
        """Run the transcript pipeline, defaulting languages to TRANSCRIPT_LANGS."""
        if preferred_languages is None:
            preferred_languages = settings.preferred_languages()
        return self.source.get_transcript(video_url.strip(), preferred_languages)

    def respond(self, video_url: Optional[str], preferred_languages: Optional[List[str]] = None) -> Tuple[int, Dict[str, Any]]:
        if not video_url or not video_url.strip():
            return 400, {"message": "Video URL is required"}

        result = self.lookup(video_url, preferred_languages)
        text = result.text() if result.ok else ""

        if not text:
            error = result.error
            logger.info(f"No transcript for {video_url}: {error.message if error else 'empty'}")
            return 404, {
                "message": "No transcript available.",
                "reason": error.message if error else None,
                "category": error.category.value if error else None,
            }
        return 200, {"transcription": text}
