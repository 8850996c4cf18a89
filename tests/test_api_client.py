"""
Tests for the API client.
"""

import pytest
import requests
from unittest.mock import patch, MagicMock

from ytcaptions.frontend.api_client import ApiClient, FALLBACK_MESSAGE


@pytest.fixture
def mock_post():
    """Fixture to mock requests.post in the client module."""
    with patch('ytcaptions.frontend.api_client.requests.post') as mock_post:
        mock_response = MagicMock()
        mock_response.raise_for_status.return_value = None
        mock_response.json.return_value = {"summary": "A short summary."}
        mock_post.return_value = mock_response
        yield mock_post


def test_summarize_video(mock_post, test_video_url):
    """Test requesting a summary."""
    client = ApiClient("http://localhost:8000")
    summary = client.summarize_video(test_video_url, mode="structured")

    assert summary == "A short summary."
    mock_post.assert_called_once_with(
        "http://localhost:8000/api/summary",
        json={"videoUrl": test_video_url, "mode": "structured"},
    )


def test_get_video_details(mock_post, test_video_url):
    """Test requesting a summary with metadata."""
    details = {"title": "T", "length": "2 minutes 5 seconds", "channel": "", "summary": "S"}
    mock_post.return_value.json.return_value = details

    client = ApiClient("http://localhost:8000")
    assert client.get_video_details(test_video_url) == details
    assert mock_post.call_args[0][0] == "http://localhost:8000/api/summary/details"


def test_fallback_on_server_error(mock_post, test_video_url):
    """Test failures are replaced by the fixed fallback message."""
    mock_post.return_value.raise_for_status.side_effect = requests.HTTPError("500 Server Error")

    client = ApiClient("http://localhost:8000")
    assert client.summarize_video(test_video_url) == FALLBACK_MESSAGE
    assert client.get_video_details(test_video_url) == {"summary": FALLBACK_MESSAGE}


def test_fallback_on_connection_error(mock_post, test_video_url):
    """Test an unreachable server also yields the fallback message."""
    mock_post.side_effect = requests.ConnectionError("refused")

    assert ApiClient("http://localhost:8000").summarize_video(test_video_url) == FALLBACK_MESSAGE


def test_invalid_url_rejected(mock_post):
    """Test invalid URLs are rejected without a request."""
    with pytest.raises(ValueError):
        ApiClient("http://localhost:8000").summarize_video("https://vimeo.com/123")
    mock_post.assert_not_called()


def test_fallback_on_body_without_summary(mock_post, test_video_url):
    """Test a successful response missing the summary yields the fallback message."""
    mock_post.return_value.json.return_value = {}

    assert ApiClient("http://localhost:8000").summarize_video(test_video_url) == FALLBACK_MESSAGE
