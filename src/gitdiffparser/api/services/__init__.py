"""Service layer for the gitdiffparser API."""

from .parse import ParseService

__all__ = ["ParseService"]
