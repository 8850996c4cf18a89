"""
Helper utility functions for the YouTube caption summarizer application.
"""

import html
import math
import re
from typing import Optional, Union

from ytcaptions.utils.error_handling import InvalidDurationError


YOUTUBE_URL_PATTERN = re.compile(
    r"^(?:https?://)?(?:m\.|www\.)?"
    r"(?:youtu\.be/|youtube\.com/(?:embed/|v/|watch\?v=|watch\?.+&v=))"
    r"([\w-]{11})(?:\S+)?$"
)

# Characters decodeURI leaves percent-encoded
_RESERVED_URI_CHARS = frozenset(";/?:@&=+$,#")
_PERCENT_RUN = re.compile(r"(?:%[0-9A-Fa-f]{2})+")
_PERCENT_TOKEN = re.compile(r"%[0-9A-Fa-f]{2}")


def is_valid_youtube_url(url: str) -> bool:
    """Check that a URL has the shape of a YouTube watch, short or embed link."""
    return bool(YOUTUBE_URL_PATTERN.match(url or ""))


def extract_video_id(url: str) -> Optional[str]:
    """Extract the 11-character video ID from a YouTube URL."""
    match = YOUTUBE_URL_PATTERN.match(url or "")
    if match:
        return match.group(1)
    return None


def format_duration(seconds: Union[int, float]) -> str:
    """
    Render a duration in seconds as readable text.

    Hours are shown only when non-zero, minutes whenever they or the hours
    are non-zero, seconds always. Every unit is pluralized unless its value
    is exactly 1, so zero reads as "0 seconds".

    Args:
        seconds: Non-negative, finite number of seconds

    Returns:
        Text such as "1 hour 0 minutes 5 seconds"

    Raises:
        InvalidDurationError: If seconds is negative, non-finite or not a number
    """
    if isinstance(seconds, bool) or not isinstance(seconds, (int, float)):
        raise InvalidDurationError(f"Duration must be a number, got {seconds!r}")
    if not math.isfinite(seconds) or seconds < 0:
        raise InvalidDurationError(f"Duration must be non-negative and finite, got {seconds!r}")

    hours, remainder = divmod(int(seconds), 3600)
    minutes, secs = divmod(remainder, 60)

    parts = []
    if hours > 0:
        parts.append(_pluralize(hours, "hour"))
    if minutes > 0 or hours > 0:
        parts.append(_pluralize(minutes, "minute"))
    parts.append(_pluralize(secs, "second"))

    return " ".join(parts)


def _pluralize(value: int, unit: str) -> str:
    return f"{value} {unit}" if value == 1 else f"{value} {unit}s"


def decode_uri(uri: str) -> str:
    """
    Percent-decode a URI the way a browser's decodeURI does.

    Escapes for reserved characters (``;/?:@&=+$,#``) are kept as-is so that
    query strings survive decoding; everything else is decoded as UTF-8.

    Raises:
        ValueError: If an escape sequence is not valid UTF-8
    """
    def _decode_run(match: re.Match) -> str:
        pieces = []
        pending = bytearray()
        for token in _PERCENT_TOKEN.findall(match.group(0)):
            byte = int(token[1:], 16)
            if chr(byte) in _RESERVED_URI_CHARS:
                pieces.append(_utf8(pending))
                pending.clear()
                pieces.append(token)
            else:
                pending.append(byte)
        pieces.append(_utf8(pending))
        return "".join(pieces)

    return _PERCENT_RUN.sub(_decode_run, uri)


def _utf8(data: bytearray) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ValueError(f"Malformed URI escape sequence: {bytes(data)!r}") from e


def decode_entities(text: str) -> str:
    """Decode named and numeric character references, e.g. ``&amp;`` and ``&#39;``."""
    return html.unescape(text)


def truncate_text(text: str, max_length: int = 100, suffix: str = "...") -> str:
    """
    Truncate text to a maximum length.

    Args:
        text: Text to truncate
        max_length: Maximum length
        suffix: Suffix to add if truncated

    Returns:
        Truncated text
    """
    if len(text) <= max_length:
        return text
    return text[:max_length - len(suffix)] + suffix
