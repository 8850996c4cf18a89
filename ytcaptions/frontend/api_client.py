"""
API client for communicating with the YouTube Caption Summarizer backend.
"""

import requests
from typing import Dict, Any, Optional
from urllib.parse import urljoin
from ytcaptions.config import config
from ytcaptions.utils.helpers import is_valid_youtube_url
from ytcaptions.utils.logger import logging

FALLBACK_MESSAGE = "No captions found"


class ApiClient:
    """Client for interacting with the YouTube Caption Summarizer API."""

    def __init__(self, base_url: str = config.PUBLIC_URL):
        """
        Initialize the API client.

        Args:
            base_url: Base URL of the API
        """
        self.base_url = base_url
        self.api_base = urljoin(base_url, "/api/")

    def _url(self, endpoint: str) -> str:
        """Get the full URL for an endpoint."""
        return urljoin(self.api_base, endpoint)

    def _post(self, endpoint: str, url: str, mode: Optional[str]) -> Dict[str, Any]:
        if not is_valid_youtube_url(url):
            raise ValueError(f"Invalid YouTube URL: {url}")

        payload = {"videoUrl": url}
        if mode:
            payload["mode"] = mode

        response = requests.post(self._url(endpoint), json=payload)
        response.raise_for_status()
        return response.json()

    def summarize_video(self, url: str, mode: Optional[str] = None) -> str:
        """
        Request a video summary.

        Args:
            url: YouTube video URL
            mode: Optional summary mode ("concise" or "structured")

        Returns:
            The summary text, or the fallback message if the request failed
        """
        try:
            return self._post("summary", url, mode).get("summary", FALLBACK_MESSAGE)
        except requests.RequestException as e:
            logging.error(f"Error fetching summary: {str(e)}")
            return FALLBACK_MESSAGE

    def get_video_details(self, url: str, mode: Optional[str] = None) -> Dict[str, Any]:
        """
        Request a video summary together with title, length and channel.

        Args:
            url: YouTube video URL
            mode: Optional summary mode ("concise" or "structured")

        Returns:
            Dictionary with title, length, channel and summary; only the
            fallback summary if the request failed
        """
        try:
            return self._post("summary/details", url, mode)
        except requests.RequestException as e:
            logging.error(f"Error fetching summary details: {str(e)}")
            return {"summary": FALLBACK_MESSAGE}
