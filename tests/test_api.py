"""
Tests for the FastAPI routes.
"""

import pytest
from unittest.mock import patch
from fastapi.testclient import TestClient

from ytcaptions.api.app import app
from ytcaptions.models.schemas import SummaryMode, VideoMetadata, VideoSummary
from ytcaptions.utils.error_handling import (
    MalformedDocumentError,
    NetworkError,
    NoCaptionsError,
    SummarizationError,
)


@pytest.fixture
def client():
    """Fixture to create a test client for the app."""
    return TestClient(app)


@pytest.fixture
def mock_pipeline():
    """Fixture to mock the summarization pipeline used by the routes."""
    with patch('ytcaptions.api.routes.summarize_youtube_video') as mock_summarize:
        mock_summarize.return_value = VideoSummary(
            video_id="abc12345678",
            metadata=VideoMetadata(title="T", duration_seconds=125, channel_name="Channel"),
            summary="A short summary.",
            transcript_text="Hello world",
        )
        yield mock_summarize


def test_root(client):
    """Test the root endpoint."""
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["name"] == "YouTube Caption Summarizer"
    assert "X-Process-Time" in response.headers


def test_summary(client, mock_pipeline, test_video_url):
    """Test the summary-only endpoint."""
    response = client.post("/api/summary", json={"videoUrl": test_video_url})

    assert response.status_code == 200
    assert response.json() == {"summary": "A short summary."}

    _, kwargs = mock_pipeline.call_args
    assert kwargs["url"] == test_video_url
    assert kwargs["include_metadata"] is False


def test_summary_details(client, mock_pipeline, test_video_url):
    """Test the endpoint with title, length and channel."""
    response = client.post(
        "/api/summary/details",
        json={"videoUrl": test_video_url, "mode": "structured"},
    )

    assert response.status_code == 200
    assert response.json() == {
        "title": "T",
        "length": "2 minutes 5 seconds",
        "channel": "Channel",
        "summary": "A short summary.",
    }

    _, kwargs = mock_pipeline.call_args
    assert kwargs["include_metadata"] is True
    assert kwargs["mode"] == SummaryMode.STRUCTURED


@pytest.mark.parametrize("body", [
    {"videoUrl": "https://vimeo.com/123"},
    {"videoUrl": "https://www.youtube.com/watch?v=abc12345678", "mode": "poem"},
    {},
])
def test_invalid_request(client, mock_pipeline, body):
    """Test malformed requests are rejected before running the pipeline."""
    response = client.post("/api/summary", json=body)

    assert response.status_code == 422
    mock_pipeline.assert_not_called()


@pytest.mark.parametrize("error", [
    NetworkError("connection refused"),
    MalformedDocumentError("no marker"),
    NoCaptionsError("No captions found"),
])
def test_caption_errors_collapse(client, mock_pipeline, test_video_url, error):
    """Test every caption-side failure maps to the same public message."""
    mock_pipeline.side_effect = error

    response = client.post("/api/summary", json={"videoUrl": test_video_url})

    assert response.status_code == 500
    assert response.json() == {"detail": "Failed to fetch captions"}


def test_summarization_error(client, mock_pipeline, test_video_url):
    """Test backend failures map to the summarization message."""
    mock_pipeline.side_effect = SummarizationError("quota exceeded")

    response = client.post("/api/summary/details", json={"videoUrl": test_video_url})

    assert response.status_code == 500
    assert response.json() == {"detail": "Failed to summarize captions"}


def test_default_mode_from_config(client, mock_pipeline, test_video_url):
    """Test requests without a mode use the configured default."""
    with patch('ytcaptions.api.routes.config.DEFAULT_SUMMARY_MODE', "structured"):
        response = client.post("/api/summary", json={"videoUrl": test_video_url})

    assert response.status_code == 200
    _, kwargs = mock_pipeline.call_args
    assert kwargs["mode"] == SummaryMode.STRUCTURED
