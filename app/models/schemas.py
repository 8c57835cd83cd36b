"""
Data models for the YouTube summary gateway.
"""
from typing import Optional, Dict, Any
from pydantic import BaseModel, ConfigDict


class SummaryRequest(BaseModel):
    """Inbound request: the video URL and the instruction for the backend."""
    # url is forwarded exactly as received, surrounding whitespace included
    url: str
    prompt: str

    def backend_payload(self) -> Dict[str, str]:
        """Body sent to the processing backend."""
        return {"url": self.url, "prompt": self.prompt}


class VideoMetadata(BaseModel):
    """Fields of the oEmbed body the UI relies on; other fields are allowed."""
    title: Optional[str] = None
    author_name: Optional[str] = None
    thumbnail_url: Optional[str] = None
    html: Optional[str] = None

    model_config = ConfigDict(extra="allow")


class ProcessingResult(BaseModel):
    """What the processing backend returned; either field may be set.

    Values are not type-checked, they are handed back to the caller as-is.
    """
    summary: Any = None
    transcript: Any = None

    model_config = ConfigDict(extra="ignore")


class SummaryResponse(BaseModel):
    """Successful gateway response."""
    # Raw oEmbed body, already checked against VideoMetadata
    metadata: Optional[Dict[str, Any]] = None
    summary: Any = None
    transcript: Any = None

    def to_response(self) -> Dict[str, Any]:
        """
        Serialize for the wire.

        ``metadata`` is always present (possibly null); ``summary`` and
        ``transcript`` only when the backend supplied them.
        """
        body: Dict[str, Any] = {"metadata": self.metadata}
        for field in ("summary", "transcript"):
            if field in self.model_fields_set:
                body[field] = getattr(self, field)
        return body


class ErrorResponse(BaseModel):
    """Failed gateway response."""
    error: str
