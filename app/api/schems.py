from pydantic import BaseModel
from typing import Optional


class SummaryBody(BaseModel):
    """Request body accepted by POST /api/summarize (documentation only)."""
    url: str
    prompt: Optional[str] = None


class ServiceInfo(BaseModel):
    """Model for the root endpoint."""
    name: str
    version: str
    description: str


class HealthResponse(BaseModel):
    """Model for health checks."""
    status: str = "ok"
