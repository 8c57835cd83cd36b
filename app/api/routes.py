"""
API routes for the YouTube summary gateway.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from app.api.schems import SummaryBody
from app.config import config
from app.core.exceptions import InternalError
from app.core.orchestrator import SummaryOrchestrator
from app.models.schemas import ErrorResponse, SummaryResponse
from app.utils.logger import logging

router = APIRouter(prefix="/api", tags=["youtube"])


def get_orchestrator() -> SummaryOrchestrator:
    """One orchestrator per request; nothing is shared between requests."""
    return SummaryOrchestrator(config)


@router.post(
    "/summarize",
    response_model=SummaryResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    openapi_extra={"requestBody": {"content": {"application/json": {"schema": SummaryBody.model_json_schema()}}}},
)
async def summarize_video(
    request: Request,
    orchestrator: SummaryOrchestrator = Depends(get_orchestrator),
):
    """
    Summarize a YouTube video by URL.

    - Forwards ``{url, prompt}`` to the processing backend
    - Adds oEmbed metadata when it can be found, ``null`` otherwise
    - Errors come back as ``{"error": message}``
    """
    # Body is decoded here so a missing url is a 400 with our message,
    # not a framework validation error
    try:
        payload = await request.json()
    except Exception as e:
        logging.error(f"Unreadable request body: {str(e)}")
        raise InternalError.from_exception(e) from e

    result = await run_in_threadpool(orchestrator.summarize, payload)
    return JSONResponse(status_code=200, content=result.to_response())
