"""
Page fetcher module: retrieves raw documents over HTTP.
"""

from typing import Optional, Dict

import requests

from ytcaptions.config import config
from ytcaptions.utils.error_handling import NetworkError
from ytcaptions.utils.logger import logging


class PageFetcher:
    """Class to fetch watch pages and caption tracks as text."""

    def __init__(self, timeout: Optional[float] = None, headers: Optional[Dict[str, str]] = None):
        """
        Initialize the fetcher.

        Args:
            timeout: Seconds to wait for each response (defaults to config)
            headers: Extra request headers (defaults to config)
        """
        self.timeout = timeout if timeout is not None else config.REQUEST_TIMEOUT
        self.headers = headers if headers is not None else config.get_http_headers()

    def fetch(self, url: str) -> str:
        """
        Fetch a URL with a single GET request.

        Args:
            url: HTTP(S) URL to fetch

        Returns:
            Response body as text

        Raises:
            NetworkError: If the request fails or returns a non-2xx status
        """
        logging.debug(f"Fetching: {url}")
        try:
            response = requests.get(url, headers=self.headers, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logging.error(f"Error fetching {url}: {str(e)}")
            raise NetworkError(f"Request to {url} failed: {str(e)}") from e

        logging.debug(f"Fetched {len(response.text)} characters from {url}")
        return response.text
