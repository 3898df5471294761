"""Main CLI entry point for gitdiffparser."""

import argparse
import logging
import sys

from .config import ParseConfig
from .errors import GitDiffParserError
from .logging_utils import configure_logging
from .parser import DiffParser, check_input_size
from .settings import get_parse_config

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create command line argument parser."""
    parser = argparse.ArgumentParser(
        prog="gitdiffparser",
        description="Parse unified diff output into structured file diffs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  git diff > changes.diff && gitdiffparser changes.diff
        """,
    )

    parser.add_argument(
        "path",
        help="Path to a file containing unified diff text",
    )

    return parser


def read_diff(path: str, config: ParseConfig) -> str:
    """Read diff text from ``path`` using the configured encoding.

    Newlines are not translated, so a bare ``\\r`` stays hunk content.
    """
    with open(path, encoding=config.encoding, newline="") as handle:
        return handle.read()


def main() -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args()
    configure_logging()

    try:
        config = get_parse_config()
        text = read_diff(args.path, config)
        check_input_size(text, config)
        documents = DiffParser().parse_text(text)

        logger.debug("Parsed diff file", extra={"path": args.path, "documents": len(documents)})
        print(len(documents))
        return 0

    except GitDiffParserError as e:
        # Grammar and consistency violations
        print(f"error: {e.code}: {e.message}", file=sys.stderr)
        return 1

    except (OSError, ValueError) as e:
        print(f"error: cannot read {args.path}: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
