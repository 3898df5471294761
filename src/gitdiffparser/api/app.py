"""FastAPI application instance for the gitdiffparser API."""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ..errors import GitDiffParserError
from ..logging_utils import configure_logging
from ..serialize import DocumentSerializer
from . import __version__
from .routes import router as api_router

logger = logging.getLogger(__name__)

_serializer = DocumentSerializer()


def create_app() -> FastAPI:
    """Build the API application with its routes and error handlers."""
    configure_logging()

    application = FastAPI(
        title="gitdiffparser API",
        description="Parse unified diff text into structured file and hunk documents",
        version=__version__,
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type"],
    )
    application.include_router(api_router)
    application.add_exception_handler(GitDiffParserError, parser_error_handler)
    application.add_exception_handler(Exception, internal_error_handler)
    return application


async def parser_error_handler(request: Request, exc: GitDiffParserError):
    """Report parser errors that escape the service layer as a 422 envelope."""
    logger.warning(
        "Diff rejected outside service layer",
        extra={"code": exc.code, "path": request.url.path},
    )
    return JSONResponse(
        status_code=422,
        content=_serializer.create_error_envelope(exc.code, exc.message, exc.details),
    )


async def internal_error_handler(request: Request, exc: Exception):
    """Report anything else as INTERNAL_ERROR without echoing the exception text."""
    logger.exception("Unhandled error", extra={"path": request.url.path})
    return JSONResponse(
        status_code=500,
        content=_serializer.create_error_envelope(
            "INTERNAL_ERROR",
            "Internal server error",
            {"exception_type": type(exc).__name__, "path": request.url.path},
        ),
    )


app = create_app()
