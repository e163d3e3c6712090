from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

class TranscriptSegment(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    text: str
    start_in_ms: int = Field(alias="startInMs")
    duration: int

class ErrorCategory(str, Enum):
    INVALID_URL = "invalid_url"
    INACCESSIBLE = "inaccessible"
    NO_CAPTIONS = "no_captions"
    NETWORK_ERROR = "network_error"
    OTHER_ERROR = "other_error"

class ErrorRecord(BaseModel):
    category: ErrorCategory
    message: str

class TranscriptResult(BaseModel):
    """Outcome of one pipeline run.

    Either ``segments`` holds a non-empty, start-ordered list and ``error`` is
    None, or ``segments`` is None and ``error`` says why.
    """
    video_id: Optional[str] = None
    language: Optional[str] = None
    segments: Optional[List[TranscriptSegment]] = None
    error: Optional[ErrorRecord] = None

    @property
    def ok(self) -> bool:
        return self.error is None and bool(self.segments)

    def text(self) -> str:
        return " ".join(seg.text for seg in self.segments or [])

    @classmethod
    def failure(cls, record: ErrorRecord, video_id: Optional[str] = None) -> "TranscriptResult":
        return cls(video_id=video_id, error=record)
