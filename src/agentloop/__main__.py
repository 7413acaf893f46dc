"""Command-line entry point: serve the Agent Loop API."""

from __future__ import annotations

import argparse

import uvicorn

from agentloop.logging import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="agentloop", description="Serve the Agent Loop API.")
    parser.add_argument("--host", default="127.0.0.1", help="Bind address (default: 127.0.0.1)")
    parser.add_argument("--port", type=int, default=8000, help="Bind port (default: 8000)")
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING or ERROR")
    parser.add_argument(
        "--no-console-log", action="store_true", help="Only write logs to the log file"
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    logger = setup_logging(level=args.log_level, console=not args.no_console_log)

    from agentloop.api import app  # noqa: PLC0415

    logger.info("Serving Agent Loop API on %s:%d", args.host, args.port)
    uvicorn.run(app, host=args.host, port=args.port, log_config=None)


if __name__ == "__main__":
    main()
