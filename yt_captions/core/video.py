from abc import ABC, abstractmethod
from typing import List, Optional
from yt_captions.models.transcript import TranscriptResult

class VideoSource(ABC):
    @abstractmethod
    def get_transcript(self, url: str, preferred_languages: Optional[List[str]] = None) -> TranscriptResult:
        """Get video transcript. Failures are reported in the result, never raised."""
        pass
