"""
Exceptions raised by the summary orchestrator.

Each error maps onto the single-field ``{"error": message}`` response body
and carries the HTTP status code the API layer should answer with.
Metadata lookups have no exception type: they degrade to ``None``.
"""

from typing import Optional


FALLBACK_ERROR_MESSAGE = "Failed to process video summary"


class SummaryServiceError(Exception):
    """Base exception for all summary gateway errors."""

    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message or FALLBACK_ERROR_MESSAGE
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)

    def to_response(self) -> dict:
        return {"error": self.message}


class ValidationError(SummaryServiceError):
    """Raised when the request is missing required input."""

    status_code = 400


class BackendError(SummaryServiceError):
    """Raised when the processing backend answers with a non-success status."""

    def __init__(self, message: str, backend_status: Optional[int] = None):
        self.backend_status = backend_status
        super().__init__(message)


class InternalError(SummaryServiceError):
    """Raised for any other fault while handling a request."""

    @classmethod
    def from_exception(cls, exc: BaseException) -> "InternalError":
        return cls(str(exc) or FALLBACK_ERROR_MESSAGE)
