"""
Data models for the YouTube caption summarizer application.
"""
import time
from enum import Enum
from typing import Optional, List
from pydantic import BaseModel, Field, computed_field
from ytcaptions.config import config
from ytcaptions.utils.helpers import format_duration


class SummaryMode(str, Enum):
    """Instruction modes supported by the summarizer."""
    CONCISE = "concise"
    STRUCTURED = "structured"


# Response token budget per mode
MODE_MAX_TOKENS = {
    SummaryMode.CONCISE: 500,
    SummaryMode.STRUCTURED: 1000,
}


class VideoMetadata(BaseModel):
    """Metadata read from the embedded player configuration."""
    title: str
    duration_seconds: int = Field(ge=0)
    channel_name: str = ""

    model_config = {"frozen": True}

    @computed_field
    @property
    def length(self) -> str:
        return format_duration(self.duration_seconds)


class CaptionTrack(BaseModel):
    """A caption track descriptor as listed in the player configuration."""
    base_url: str
    language_code: Optional[str] = None
    kind: Optional[str] = None

    model_config = {"frozen": True}


class VideoCaptions(BaseModel):
    """Result of caption extraction: optional metadata plus the transcript."""
    metadata: Optional[VideoMetadata] = None
    transcript: str


class SummaryConfig(BaseModel):
    """Configuration for summarization operations."""
    model: str = config.DEFAULT_SUMMARY_MODEL
    model_provider: str = config.MODEL_PROVIDER
    mode: SummaryMode = SummaryMode.CONCISE
    temperature: float = config.TEMPERATURE

    @property
    def max_tokens(self) -> int:
        return MODE_MAX_TOKENS[self.mode]


class StructuredSummary(BaseModel):
    """A structured-mode completion split into its overview and key points."""
    overview: str = ""
    key_points: List[str] = Field(default_factory=list, max_length=5)

    @classmethod
    def from_text(cls, text: str) -> "StructuredSummary":
        """
        Split a structured completion into overview and key points.

        The first blank-line separated block is the overview; the following
        hyphen-prefixed blocks are key points, of which at most five are kept.
        """
        blocks = [block.strip() for block in text.strip().split("\n\n") if block.strip()]
        if not blocks:
            return cls()

        overview = blocks[0]
        key_points = []
        for block in blocks[1:]:
            for line in block.splitlines():
                line = line.strip()
                if line.startswith("-"):
                    key_points.append(line.lstrip("-").strip())

        return cls(overview=overview, key_points=key_points[:5])

    def to_text(self) -> str:
        """Serialize back to the blank-line separated layout."""
        return "\n\n".join([self.overview] + [f"- {point}" for point in self.key_points])


class VideoSummary(BaseModel):
    """Model for a summary produced by one pipeline run."""
    video_id: Optional[str] = None
    metadata: Optional[VideoMetadata] = None
    summary: str
    transcript_text: str
    mode: SummaryMode = SummaryMode.CONCISE
    created_at: str = Field(default_factory=lambda: time.strftime("%Y-%m-%d %H:%M:%S"))
