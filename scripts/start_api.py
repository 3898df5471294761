#!/usr/bin/env python3
"""Run the gitdiffparser API under uvicorn."""

import argparse

import uvicorn


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the server script."""
    parser = argparse.ArgumentParser(description="Serve the gitdiffparser API")
    parser.add_argument("--host", default="127.0.0.1", help="Bind address (default: 127.0.0.1)")
    parser.add_argument("--port", type=int, default=8000, help="Bind port (default: 8000)")
    parser.add_argument(
        "--log-level",
        default="info",
        choices=["critical", "error", "warning", "info", "debug"],
        help="uvicorn log level (default: info)",
    )
    return parser


def main():
    args = create_parser().parse_args()
    uvicorn.run(
        "gitdiffparser.api.app:app",
        host=args.host,
        port=args.port,
        log_level=args.log_level,
    )


if __name__ == "__main__":
    main()
