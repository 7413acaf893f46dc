"""Logging for the Agent Loop dashboard service.

Every component logs under the ``agentloop`` logger tree; ``setup_logging``
attaches a size-rotated log file (and optionally the console) to its root.
Upstream tracker payloads pass through ``response_excerpt`` so credentials
never reach the log and error bodies stay bounded.
"""

from __future__ import annotations

import logging
import os
import re
from logging.handlers import RotatingFileHandler
from pathlib import Path

ROOT_LOGGER = "agentloop"

LOG_DIR_ENV = "AGENTLOOP_LOG_DIR"
LOG_LEVEL_ENV = "AGENTLOOP_LOG_LEVEL"

DEFAULT_LOG_DIR = "logs"
DEFAULT_LOG_FILE = "agentloop.log"
DEFAULT_MAX_BYTES = 5 * 1024 * 1024  # 5MB
DEFAULT_BACKUP_COUNT = 3
DEFAULT_LOG_LEVEL = "INFO"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

EXCERPT_LENGTH = 2000

_REDACTIONS = [
    (re.compile(r"ghp_[a-zA-Z0-9]{36}"), "[GITHUB_TOKEN]"),  # classic PAT
    (re.compile(r"gho_[a-zA-Z0-9]{36}"), "[GITHUB_TOKEN]"),  # OAuth
    (re.compile(r"github_pat_[a-zA-Z0-9_]{82}"), "[GITHUB_TOKEN]"),  # fine-grained PAT
    (re.compile(r"Bearer [a-zA-Z0-9._-]+"), "Bearer [REDACTED]"),
    (re.compile(r"token=[a-zA-Z0-9._-]+"), "token=[REDACTED]"),
]


def _resolve_level(level: str | None) -> int:
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)
    return getattr(logging, level.upper(), logging.INFO)


def _build_handlers(
    log_path: Path, max_bytes: int, backup_count: int, console: bool
) -> list[logging.Handler]:
    handlers: list[logging.Handler] = [
        RotatingFileHandler(
            log_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
    ]
    if console:
        handlers.append(logging.StreamHandler())
    return handlers


def setup_logging(
    log_dir: str | Path | None = None,
    log_file: str = DEFAULT_LOG_FILE,
    max_bytes: int = DEFAULT_MAX_BYTES,
    backup_count: int = DEFAULT_BACKUP_COUNT,
    level: str | None = None,
    console: bool = True,
) -> logging.Logger:
    """Configure the ``agentloop`` logger tree.

    Safe to call more than once: handlers from an earlier call are closed
    and replaced.

    Args:
        log_dir: Directory for log files. Falls back to AGENTLOOP_LOG_DIR,
                 then to 'logs' in the current directory.
        log_file: Log file name.
        max_bytes: Maximum size per log file before rotation.
        backup_count: Number of rotated files to keep.
        level: Level name (DEBUG, INFO, WARNING, ERROR). Falls back to
               AGENTLOOP_LOG_LEVEL, then INFO.
        console: Whether to also log to the console.

    Returns:
        The root agentloop logger.
    """
    if log_dir is None:
        log_dir = os.environ.get(LOG_DIR_ENV, DEFAULT_LOG_DIR)
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / log_file

    log_level = _resolve_level(level)
    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(log_level)

    for handler in list(root.handlers):
        handler.close()
    root.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in _build_handlers(log_path, max_bytes, backup_count, console):
        handler.setLevel(log_level)
        handler.setFormatter(formatter)
        root.addHandler(handler)

    root.info(
        "Agent Loop logging initialized (level=%s, file=%s)",
        logging.getLevelName(log_level),
        log_path,
    )
    return root


def get_logger(name: str) -> logging.Logger:
    """Get the logger for a component, e.g. ``get_logger("tracker")``."""
    if name != ROOT_LOGGER and not name.startswith(f"{ROOT_LOGGER}."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


def truncate_output(output: str, max_length: int = EXCERPT_LENGTH) -> str:
    """Cut long text down to ``max_length`` characters, noting how much was dropped."""
    if len(output) <= max_length:
        return output
    return output[:max_length] + f"\n... [truncated, {len(output) - max_length} more chars]"


def sanitize_for_log(text: str) -> str:
    """Redact GitHub tokens and bearer credentials from text."""
    for pattern, replacement in _REDACTIONS:
        text = pattern.sub(replacement, text)
    return text


def response_excerpt(body: str, max_length: int = EXCERPT_LENGTH) -> str:
    """Prepare an upstream response body for logging.

    Args:
        body: Raw response text from the tracker.
        max_length: Characters to keep after redaction.

    Returns:
        The redacted, truncated body.
    """
    return truncate_output(sanitize_for_log(body), max_length)
