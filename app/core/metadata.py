"""
Best-effort video metadata lookup through YouTube's oEmbed endpoint.
"""

from typing import Any, Dict, Optional

import requests

from app.config import config
from app.core.resolver import extract_video_id
from app.models.schemas import VideoMetadata
from app.utils.logger import logging


class MetadataFetcher:
    """Fetch title, author and thumbnail for a video URL.

    Every failure (unresolvable URL, transport error, non-2xx status,
    unparseable body) yields ``None``; nothing is raised to the caller.
    """

    def __init__(self, oembed_url_template: str = config.OEMBED_URL_TEMPLATE):
        self.oembed_url_template = oembed_url_template

    def oembed_url(self, video_id: str) -> str:
        return self.oembed_url_template.format(video_id=video_id)

    def fetch(self, url: str) -> Optional[Dict[str, Any]]:
        """
        Look up metadata for a video URL.

        Args:
            url: Raw URL as supplied by the caller

        Returns:
            The oEmbed body unchanged, or None when the lookup fails for any reason
        """
        video_id = extract_video_id(url)
        if not video_id:
            logging.debug(f"No video ID in {url!r}, skipping metadata lookup")
            return None

        try:
            response = requests.get(self.oembed_url(video_id))
            if not 200 <= response.status_code < 300:
                logging.warning(f"oEmbed lookup for {video_id} returned {response.status_code}")
                return None

            data = response.json()
            if not isinstance(data, dict):
                logging.warning(f"oEmbed lookup for {video_id} returned non-object JSON")
                return None

            VideoMetadata.model_validate(data)
            return data
        except Exception as e:
            # Transport errors, bad JSON and unexpected field types all land here
            logging.error(f"Error fetching metadata: {str(e)}")
            return None
