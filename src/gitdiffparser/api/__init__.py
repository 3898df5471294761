"""HTTP API for gitdiffparser."""

from .. import __version__

__all__ = ["__version__"]
