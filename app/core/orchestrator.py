"""
Summary orchestration: validate the request, call the processing backend,
attach best-effort metadata, and normalize every failure.
"""

import traceback
from typing import Any, Dict, Optional

import requests

from app.config import config
from app.core.exceptions import (
    SummaryServiceError,
    ValidationError,
    BackendError,
    InternalError,
)
from app.core.metadata import MetadataFetcher
from app.models.schemas import SummaryRequest, ProcessingResult, SummaryResponse
from app.utils.logger import logging

URL_REQUIRED_MESSAGE = "YouTube URL is required"


class SummaryOrchestrator:
    """Single entry point for a summary request.

    A request moves through validation, the backend call and, only once the
    backend succeeded, the metadata lookup. Backend and validation failures
    end the request; metadata failures are absorbed as ``metadata=None``.
    """

    def __init__(self, settings=config, metadata_fetcher: Optional[MetadataFetcher] = None):
        """
        Initialize the orchestrator.

        Args:
            settings: Config class providing BACKEND_URL, DEFAULT_PROMPT
                and OEMBED_URL_TEMPLATE
            metadata_fetcher: Metadata lookup to use, built from settings if omitted
        """
        self.backend_url = settings.BACKEND_URL
        self.default_prompt = settings.DEFAULT_PROMPT
        self.metadata_fetcher = metadata_fetcher or MetadataFetcher(settings.OEMBED_URL_TEMPLATE)

    @property
    def summarize_endpoint(self) -> str:
        # An unset base URL is not rejected here; the request itself will fail
        base = (self.backend_url or "").rstrip("/")
        return f"{base}/summarize"

    def summarize(self, payload: Any) -> SummaryResponse:
        """
        Handle one decoded request body.

        Args:
            payload: Decoded JSON body, expected to hold ``url`` and optionally ``prompt``

        Returns:
            SummaryResponse with backend output and metadata (possibly None)

        Raises:
            ValidationError: ``url`` is missing or empty
            BackendError: the backend answered with a non-success status
            InternalError: anything else went wrong
        """
        try:
            request = self.validate(payload)

            result = self.call_backend(request)

            logging.debug(f"Backend succeeded for {request.url}, resolving metadata")
            metadata = self.metadata_fetcher.fetch(request.url)

            return SummaryResponse(metadata=metadata, **result.model_dump(exclude_unset=True))
        except SummaryServiceError:
            raise
        except Exception as e:
            logging.error(f"Error processing request: {str(e)}")
            logging.error(traceback.format_exc())
            raise InternalError.from_exception(e) from e

    def validate(self, payload: Any) -> SummaryRequest:
        """Check required fields and fill in the default prompt."""
        if not isinstance(payload, dict):
            raise ValidationError(URL_REQUIRED_MESSAGE)

        url = payload.get("url")
        if not isinstance(url, str) or not url.strip():
            raise ValidationError(URL_REQUIRED_MESSAGE)

        prompt = payload.get("prompt")
        if not isinstance(prompt, str) or not prompt.strip():
            prompt = self.default_prompt

        return SummaryRequest(url=url, prompt=prompt)

    def call_backend(self, request: SummaryRequest) -> ProcessingResult:
        """
        POST the request to the processing backend, exactly once.

        Args:
            request: Validated summary request

        Returns:
            ProcessingResult with whichever of summary/transcript the backend set
        """
        logging.info(f"Requesting summary for {request.url} from {self.summarize_endpoint}")
        response = requests.post(
            self.summarize_endpoint,
            json=request.backend_payload(),
            headers={"Content-Type": "application/json"},
        )

        if not 200 <= response.status_code < 300:
            message = self._backend_error_message(response)
            logging.error(f"Backend returned {response.status_code}: {message}")
            raise BackendError(message, backend_status=response.status_code)

        data = response.json()
        if not isinstance(data, dict):
            raise InternalError("Backend returned an unexpected response")

        return ProcessingResult(**data)

    @staticmethod
    def _backend_error_message(response: requests.Response) -> str:
        """Use the backend's ``detail`` when readable, else a status-based message."""
        try:
            data: Dict[str, Any] = response.json()
        except ValueError:
            data = {}

        detail = data.get("detail") if isinstance(data, dict) else None
        if detail:
            return detail if isinstance(detail, str) else str(detail)
        return f"Backend error: {response.status_code}"
