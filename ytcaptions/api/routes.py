"""
API routes for the YouTube Caption Summarizer application.
"""

from fastapi import APIRouter, HTTPException
from starlette.concurrency import run_in_threadpool

from ytcaptions.api.schemas import (
    VideoRequest,
    MinimalSummaryResponse,
    SummaryResponse,
)
from ytcaptions.config import config
from ytcaptions.main import summarize_youtube_video
from ytcaptions.models.schemas import SummaryMode, VideoSummary
from ytcaptions.utils.error_handling import CaptionFetchError, SummarizationError
from ytcaptions.utils.logger import logging

router = APIRouter(prefix="/api", tags=["youtube"])


@router.post("/summary", response_model=MinimalSummaryResponse)
async def summarize_video(request: VideoRequest):
    """Summarize a YouTube video by URL, returning the summary only."""
    summary = await _run_pipeline(request, include_metadata=False)
    return MinimalSummaryResponse(summary=summary.summary)


@router.post("/summary/details", response_model=SummaryResponse)
async def summarize_video_details(request: VideoRequest):
    """Summarize a YouTube video by URL, including title, length and channel."""
    summary = await _run_pipeline(request, include_metadata=True)
    metadata = summary.metadata
    return SummaryResponse(
        title=metadata.title,
        length=metadata.length,
        channel=metadata.channel_name,
        summary=summary.summary,
    )


async def _run_pipeline(request: VideoRequest, include_metadata: bool) -> VideoSummary:
    """Run the blocking pipeline off the event loop and map its failures to HTTP errors."""
    mode = request.mode or SummaryMode(config.DEFAULT_SUMMARY_MODE)
    try:
        return await run_in_threadpool(
            summarize_youtube_video,
            url=request.video_url,
            mode=mode,
            include_metadata=include_metadata,
        )
    except CaptionFetchError as e:
        logging.error(f"Error fetching captions: {str(e)}")
        raise HTTPException(status_code=500, detail=CaptionFetchError.public_message)
    except SummarizationError as e:
        logging.error(f"Error summarizing captions: {str(e)}")
        raise HTTPException(status_code=500, detail=SummarizationError.public_message)
