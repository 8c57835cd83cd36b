"""
FastAPI application for the YouTube summary gateway.
"""

import time
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import config
from app.api.routes import router
from app.api.schems import ServiceInfo, HealthResponse
from app.core.exceptions import SummaryServiceError, FALLBACK_ERROR_MESSAGE
from app.utils.logger import logging

# FastAPI application
app = FastAPI(
    title=config.APP_NAME,
    version=config.APP_VERSION,
    description="An API that summarizes YouTube videos through a processing backend",
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
async def startup_event():
    """Report the effective configuration on startup."""
    logging.info(f"Starting {config.APP_NAME} v{config.APP_VERSION}")
    logging.info(f"Processing backend: {config.BACKEND_URL or '<not set>'}")


@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    """Middleware to add processing time header to responses."""
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)
    return response


@app.exception_handler(SummaryServiceError)
async def summary_error_handler(request: Request, exc: SummaryServiceError):
    """Map gateway errors onto the ``{"error": message}`` body."""
    logging.warning(f"{exc.__class__.__name__} ({exc.status_code}): {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_response())


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler for unhandled exceptions."""
    logging.error(f"Unhandled error: {str(exc)}")
    return JSONResponse(
        status_code=500,
        content={"error": str(exc) or FALLBACK_ERROR_MESSAGE},
    )


# Include API router
app.include_router(router)


# Root
@app.get("/", response_model=ServiceInfo)
async def root():
    """Root endpoint returning basic API information."""
    return {
        "name": config.APP_NAME,
        "version": config.APP_VERSION,
        "description": "YouTube Summary AI gateway",
    }


@app.get("/health", response_model=HealthResponse)
async def health():
    return {"status": "ok"}
