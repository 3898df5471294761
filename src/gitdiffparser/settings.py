"""Application-wide settings and environment loading."""

import logging
import os
from functools import lru_cache

from dotenv import load_dotenv

from .config import ParseConfig

logger = logging.getLogger(__name__)

load_dotenv()
logger.debug("Environment variables loaded from .env if present")


@lru_cache(maxsize=1)
def get_parse_config() -> ParseConfig:
    """Return parse configuration built from environment variables."""
    encoding = os.getenv("GITDIFF_ENCODING", "utf-8")
    max_input_bytes = int(os.getenv("GITDIFF_MAX_INPUT_BYTES", "8000000"))
    logger.debug(
        "Parse configuration loaded",
        extra={"encoding": encoding, "max_input_bytes": max_input_bytes},
    )
    return ParseConfig(encoding=encoding, max_input_bytes=max_input_bytes)
