"""
API client for communicating with the YouTube summary gateway.
"""

import requests
from typing import Dict, Any, Optional
from urllib.parse import urljoin
from app.config import config

GENERIC_ERROR_MESSAGE = "Failed to generate summary"


class ApiError(Exception):
    """Raised when the gateway answers with an error body."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class ApiClient:
    """Client for interacting with the YouTube summary gateway."""

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

    def summarize_video(self, url: str, prompt: Optional[str] = None) -> Dict[str, Any]:
        """
        Request a video summary.

        Args:
            url: YouTube video URL
            prompt: Instruction for the backend; the default prompt is used if blank

        Returns:
            Dictionary with metadata and summary or transcript

        Raises:
            ApiError: the gateway returned an error response
        """
        response = requests.post(
            self._url("summarize"),
            json={
                "url": url.strip(),
                "prompt": (prompt or "").strip() or config.DEFAULT_PROMPT,
            }
        )

        try:
            data = response.json()
        except ValueError:
            data = {}

        if not 200 <= response.status_code < 300:
            message = data.get("error") if isinstance(data, dict) else None
            raise ApiError(message or GENERIC_ERROR_MESSAGE, response.status_code)

        return data

    def health(self) -> Dict[str, Any]:
        """Check that the API is up."""
        response = requests.get(urljoin(self.base_url, "/health"))
        response.raise_for_status()
        return response.json()
