"""Parse routes for gitdiffparser API."""

import logging
from typing import Any, Dict

from fastapi import APIRouter

from ..models import ParseRequest
from ..services import ParseService

router = APIRouter(tags=["parse"])

logger = logging.getLogger(__name__)

parse_service = ParseService()


@router.post("/parse")
def parse_diff(request: ParseRequest) -> Dict[str, Any]:
    """Parse unified diff text into file diff documents."""
    logger.info("Received parse request", extra={"chars": len(request.diff)})
    return parse_service.parse_diff_request(request.diff)


@router.post("/tokenize")
def tokenize_diff(request: ParseRequest) -> Dict[str, Any]:
    """Classify each diff line into a typed event."""
    logger.info("Received tokenize request", extra={"chars": len(request.diff)})
    return parse_service.tokenize_request(request.diff)
