"""
YouTube Caption Summarization Application.

This application fetches a YouTube watch page, extracts the transcript of
its first caption track, and generates a summary using LLM models.
"""

from ytcaptions.config import config

__version__ = config.APP_VERSION
