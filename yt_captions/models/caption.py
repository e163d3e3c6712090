from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

class CaptionTrack(BaseModel):
    """One subtitle stream listed in ``captions.playerCaptionsTracklistRenderer``."""
    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    kind: str = ""  # "asr" for auto-generated, empty for manual
    language_code: str = Field(default="", alias="languageCode")
    base_url: str = Field(default="", alias="baseUrl")

    @field_validator("kind", "language_code", "base_url", mode="before")
    @classmethod
    def _null_as_empty(cls, value):
        # the player response sends null for fields it leaves unset
        return "" if value is None else value

    @property
    def is_asr(self) -> bool:
        return self.kind == "asr"

class CaptionHints(BaseModel):
    default_caption_track_index: Optional[int] = None
    default_translation_source_indices: List[int] = []

class SelectedTrack(BaseModel):
    url: str
    language_code: str
    kind: str = ""

class PlayabilityStatus(BaseModel):
    model_config = ConfigDict(extra="ignore")

    status: Optional[str] = None
    reason: Optional[str] = None
