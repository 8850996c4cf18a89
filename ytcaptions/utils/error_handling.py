"""
Centralized error handling for the application.

Every pipeline failure is terminal for the request that raised it. The
caption side and the summarizer side each collapse into one outward-facing
parent class, so callers can tell "failed to fetch captions" from "failed to
summarize captions" without knowing the finer varieties.
"""

import json
from typing import Dict, Any

from ytcaptions.config import config
from ytcaptions.utils.logger import logging


class VideoSummarizerError(Exception):
    """Base class for all pipeline errors."""


class CaptionFetchError(VideoSummarizerError):
    """Fetching or extracting the captions of a video failed."""

    public_message = "Failed to fetch captions"


class NetworkError(CaptionFetchError):
    """An outbound HTTP request could not complete."""


class MalformedDocumentError(CaptionFetchError):
    """The embedded player configuration is missing or unparsable."""


class NoCaptionsError(CaptionFetchError):
    """The document parsed fine but the video has no caption tracks."""


class InvalidDurationError(CaptionFetchError, ValueError):
    """A duration is negative, non-finite or not a number."""


class SummarizationError(VideoSummarizerError):
    """The text-generation backend call failed."""

    public_message = "Failed to summarize captions"


def log_diagnostic_info(context: Dict[str, Any]):
    """
    Log diagnostic information for debugging.

    Args:
        context: Dictionary of diagnostic information
    """
    if not config.DEBUG:
        return

    try:
        logging.info(f"Diagnostic info: {json.dumps(context, default=str)}")
    except (TypeError, ValueError) as e:
        logging.error(f"Error logging diagnostic info: {str(e)}")
