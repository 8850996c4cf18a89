"""
Configuration for pytest tests.
"""

import json
import os
import pytest


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Setup test environment variables."""
    os.environ["OPENAI_API_KEY"] = os.environ.get("OPENAI_API_KEY", "test_api_key")
    os.environ["ENVIRONMENT"] = "development"
    yield


@pytest.fixture(scope="session")
def test_video_url():
    """Return a test YouTube video URL."""
    return "https://www.youtube.com/watch?v=abc12345678"


@pytest.fixture
def player_response():
    """Return a recorded-style player response with one caption track."""
    return {
        "videoDetails": {
            "videoId": "abc12345678",
            "title": "T",
            "lengthSeconds": "125",
            "author": "Uploader",
        },
        "captions": {
            "playerCaptionsTracklistRenderer": {
                "captionTracks": [
                    {"baseUrl": "https://x/caps", "languageCode": "en", "kind": "asr"}
                ]
            }
        },
    }


@pytest.fixture
def make_watch_page():
    """Return a function that embeds a player response in a watch page."""
    def _make(player_response):
        body = player_response if isinstance(player_response, str) else json.dumps(player_response)
        return (
            "<!DOCTYPE html><html><head><title>video</title></head><body>"
            '<script nonce="abc">var ytcfg = {};</script>'
            f'<script nonce="abc">var ytInitialPlayerResponse = {body};</script>'
            '<script nonce="abc">var ytInitialData = {};</script>'
            "</body></html>"
        )
    return _make


@pytest.fixture
def caption_xml():
    """Return a timed-text caption document."""
    return (
        '<?xml version="1.0" encoding="utf-8" ?>'
        "<transcript>"
        '<text start="0.0" dur="1.5">Hello</text>'
        '<text start="1.5" dur="2.0">world</text>'
        "</transcript>"
    )
