"""
Module for extracting metadata and captions from a YouTube watch page.

The watch page inlines its player configuration as a JSON object assigned
to ``ytInitialPlayerResponse`` inside a script tag. All of the string slicing
against that page lives here so it can be tested on recorded documents.
"""

import json
import xml.etree.ElementTree as ET
from typing import Any, Dict, Optional

from pydantic import ValidationError

from ytcaptions.core.page_fetcher import PageFetcher
from ytcaptions.models.schemas import CaptionTrack, VideoCaptions, VideoMetadata
from ytcaptions.utils.error_handling import (
    MalformedDocumentError,
    NoCaptionsError,
    log_diagnostic_info,
)
from ytcaptions.utils.helpers import decode_entities, decode_uri, truncate_text
from ytcaptions.utils.logger import logging

PLAYER_RESPONSE_MARKER = "ytInitialPlayerResponse = "
PLAYER_RESPONSE_TERMINATOR = ";</script>"


class CaptionExtractor:
    """Class to turn a watch page into video metadata and a plain-text transcript."""

    def __init__(self, fetcher: Optional[PageFetcher] = None):
        """
        Initialize the extractor.

        Args:
            fetcher: Fetcher used for the caption track request
        """
        self.fetcher = fetcher or PageFetcher()

    def extract(self, doc: str, include_metadata: bool = False) -> VideoCaptions:
        """
        Extract the transcript (and optionally metadata) from a watch page.

        Args:
            doc: Raw HTML of the watch page
            include_metadata: Whether title, length and channel are required

        Returns:
            VideoCaptions with the decoded transcript

        Raises:
            MalformedDocumentError: If the player configuration is missing or invalid
            NoCaptionsError: If the video has no caption tracks
            NetworkError: If the caption track cannot be fetched
        """
        player_response = self.parse_player_response(doc)

        metadata = self.extract_metadata(player_response) if include_metadata else None

        track = self.select_caption_track(player_response)
        try:
            caption_url = decode_uri(track.base_url)
        except ValueError as e:
            raise MalformedDocumentError(f"Caption track URL is not decodable: {str(e)}") from e

        logging.info(f"Fetching caption track: {truncate_text(caption_url)}")
        caption_xml = self.fetcher.fetch(caption_url)

        transcript = self.parse_timed_text(caption_xml)
        logging.info(f"Extracted transcript of length {len(transcript)}")

        return VideoCaptions(metadata=metadata, transcript=transcript)

    @staticmethod
    def parse_player_response(doc: str) -> Dict[str, Any]:
        """Locate and parse the JSON object assigned to ytInitialPlayerResponse."""
        marker_index = doc.find(PLAYER_RESPONSE_MARKER)
        if marker_index == -1:
            log_diagnostic_info({"reason": "marker not found", "document_start": truncate_text(doc, 200)})
            raise MalformedDocumentError("Player response marker not found in document")

        json_start = marker_index + len(PLAYER_RESPONSE_MARKER)
        json_end = doc.find(PLAYER_RESPONSE_TERMINATOR, json_start)
        if json_end == -1:
            raise MalformedDocumentError("Player response terminator not found in document")

        json_string = doc[json_start:json_end]
        try:
            player_response = json.loads(json_string)
        except json.JSONDecodeError as e:
            log_diagnostic_info({"reason": str(e), "json_start": truncate_text(json_string, 200)})
            raise MalformedDocumentError(f"Player response is not valid JSON: {str(e)}") from e

        if not isinstance(player_response, dict):
            raise MalformedDocumentError("Player response is not a JSON object")

        return player_response

    @staticmethod
    def extract_metadata(player_response: Dict[str, Any]) -> VideoMetadata:
        """Read title, duration and channel name from the player response."""
        details = player_response.get("videoDetails")
        if not isinstance(details, dict):
            raise MalformedDocumentError("Player response has no videoDetails")

        title = details.get("title")
        if not isinstance(title, str):
            raise MalformedDocumentError("Video title missing from videoDetails")

        raw_length = details.get("lengthSeconds")
        if isinstance(raw_length, bool) or (isinstance(raw_length, float) and not raw_length.is_integer()):
            raise MalformedDocumentError(f"Invalid lengthSeconds: {raw_length!r}")
        try:
            duration_seconds = int(raw_length)
        except (TypeError, ValueError, OverflowError) as e:
            raise MalformedDocumentError(f"Invalid lengthSeconds: {raw_length!r}") from e
        if duration_seconds < 0:
            raise MalformedDocumentError(f"Negative lengthSeconds: {raw_length!r}")

        return VideoMetadata(
            title=title,
            duration_seconds=duration_seconds,
            channel_name=_channel_name(player_response),
        )

    @staticmethod
    def select_caption_track(player_response: Dict[str, Any]) -> CaptionTrack:
        """Return the first caption track listed, without any language preference."""
        captions = player_response.get("captions")
        if not captions:
            raise NoCaptionsError("No captions found")
        if not isinstance(captions, dict):
            raise MalformedDocumentError("captions is not a JSON object")

        renderer = captions.get("playerCaptionsTracklistRenderer") or {}
        tracks = renderer.get("captionTracks") if isinstance(renderer, dict) else None
        if not tracks or not isinstance(tracks, list):
            raise NoCaptionsError("No caption tracks found")

        first = tracks[0]
        if not isinstance(first, dict) or not isinstance(first.get("baseUrl"), str) or not first["baseUrl"]:
            raise MalformedDocumentError("First caption track has no baseUrl")

        logging.debug(f"Selected caption track 0 of {len(tracks)}")
        try:
            return CaptionTrack(
                base_url=first["baseUrl"],
                language_code=first.get("languageCode"),
                kind=first.get("kind"),
            )
        except ValidationError as e:
            raise MalformedDocumentError(f"Invalid caption track descriptor: {str(e)}") from e

    @staticmethod
    def parse_timed_text(caption_xml: str) -> str:
        """Join the text segments of a timed-text document and decode entities."""
        try:
            root = ET.fromstring(caption_xml)
        except ET.ParseError as e:
            raise MalformedDocumentError(f"Caption track is not valid XML: {str(e)}") from e

        if root.tag != "transcript":
            raise MalformedDocumentError(f"Unexpected caption root element: {root.tag}")

        segments = ["".join(element.itertext()) for element in root.findall("text")]
        return decode_entities(" ".join(segments))


def _channel_name(player_response: Dict[str, Any]) -> str:
    """Featured channel name, falling back to the video author, then empty."""
    try:
        channel_name = player_response["annotations"][0]["playerAnnotationsExpandedRenderer"][
            "featuredChannel"]["channelName"]
    except (KeyError, IndexError, TypeError):
        channel_name = None
    if isinstance(channel_name, str):
        return channel_name

    author = (player_response.get("videoDetails") or {}).get("author")
    return author if isinstance(author, str) else ""
