"""API route registration for gitdiffparser."""

from fastapi import APIRouter

from . import meta, parse

router = APIRouter()
router.include_router(meta.router)
router.include_router(parse.router)

__all__ = ["router"]
