from pydantic import BaseModel, Field, field_validator
from typing import Optional
from ytcaptions.models.schemas import SummaryMode
from ytcaptions.utils.helpers import is_valid_youtube_url


class VideoRequest(BaseModel):
    """Model for requesting video summarization."""
    video_url: str = Field(alias="videoUrl")
    mode: Optional[SummaryMode] = None

    model_config = {"populate_by_name": True}

    @field_validator("video_url")
    def validate_youtube_url(cls, v):
        if not is_valid_youtube_url(v):
            raise ValueError("URL must be a valid YouTube URL")
        return v


class MinimalSummaryResponse(BaseModel):
    """Model for the summary-only response."""
    summary: str


class SummaryResponse(BaseModel):
    """Model for summary responses with video metadata."""
    title: str
    length: str
    channel: str
    summary: str
