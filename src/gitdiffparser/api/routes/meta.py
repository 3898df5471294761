"""Meta endpoints for gitdiffparser API."""

import logging

from fastapi import APIRouter

from .. import __version__
from ..models import HealthResponse, VersionResponse

router = APIRouter(tags=["meta"])

logger = logging.getLogger(__name__)


@router.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Health check endpoint."""
    logger.debug("Health check invoked")
    return HealthResponse(status="healthy", version=__version__)


@router.get("/version", response_model=VersionResponse)
def version_info() -> VersionResponse:
    """Version information endpoint."""
    logger.debug("Version endpoint invoked")
    return VersionResponse(version=__version__, api_version="v1")


@router.get("/", include_in_schema=False)
def root() -> dict:
    """Root endpoint providing basic API metadata."""
    return {
        "name": "gitdiffparser API",
        "version": __version__,
        "description": "Structured parsing of unified diff text",
        "endpoints": {
            "parse": "POST /parse - Parse diff text into file diff documents",
            "tokenize": "POST /tokenize - Classify diff lines into events",
            "health": "GET /health - Health check",
            "version": "GET /version - Version information",
            "docs": "GET /docs - API documentation",
        },
    }
