"""
YouTube URL resolution.

Turns a user-supplied string into the canonical video ID used to look up
oEmbed metadata. Resolution failure is an ordinary outcome and is reported
as ``None``, never as an exception.
"""

import re
from typing import Any, Optional
from urllib.parse import urlparse, parse_qs

SHORT_LINK_HOST = "youtu.be"
VIDEO_HOST = "youtube.com"
WATCH_PATH = "/watch"
EMBED_PREFIXES = ("/embed/", "/v/")

# Same loose check the web form applies before submitting
YOUTUBE_URL_PATTERN = re.compile(r"^(https?://)?(www\.)?(youtube\.com|youtu\.be)/.+")


def extract_video_id(url: Any) -> Optional[str]:
    """
    Extract the video ID from a YouTube URL.

    Recognized forms, checked in order:
        https://youtu.be/<id>
        https://www.youtube.com/watch?v=<id>
        https://www.youtube.com/embed/<id> and https://www.youtube.com/v/<id>

    Args:
        url: Raw value supplied by the caller

    Returns:
        The video ID, or None when the value cannot be resolved
    """
    if not isinstance(url, str) or not url.strip():
        return None

    try:
        parsed = urlparse(url.strip())
        hostname = parsed.hostname
    except ValueError:
        return None

    # Only absolute URLs count, "youtube.com/watch?v=x" is not one
    if not parsed.scheme or not hostname:
        return None

    path = parsed.path or "/"

    if hostname == SHORT_LINK_HOST:
        return path[1:] or None

    if VIDEO_HOST in hostname:
        if path == WATCH_PATH:
            values = parse_qs(parsed.query).get("v")
            return values[0] if values else None
        if path.startswith(EMBED_PREFIXES):
            return path.split("/")[2] or None

    return None


def is_youtube_url(text: str) -> bool:
    return bool(text) and YOUTUBE_URL_PATTERN.match(text) is not None
