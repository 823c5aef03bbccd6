"""Logging helpers for SeqKit."""

from __future__ import annotations

import logging
import os
import tempfile
from logging.handlers import RotatingFileHandler
from pathlib import Path

from seqkit import constants

_LOGGER_NAME = "seqkit"


def _has_handler(logger: logging.Logger, handler_key: str) -> bool:
    return any(
        getattr(handler, "seqkit_handler", None) == handler_key for handler in logger.handlers
    )


def _log_level() -> int:
    level_name = os.environ.get(constants.ENV_LOG_LEVEL, "INFO").upper()
    return getattr(logging, level_name, logging.INFO)


def _log_path() -> Path:
    configured = os.environ.get(constants.ENV_LOG_PATH)
    if configured:
        return Path(configured).expanduser()
    return Path(tempfile.gettempdir()) / "seqkit.log"


def setup_logging(enable_console: bool = True, level: int | None = None) -> Path:
    """Configure SeqKit logging.

    Args:
        enable_console: Whether to enable console logging.
        level: Logging level (defaults to SEQKIT_LOG_LEVEL env var or INFO).

    Returns:
        Path to the log file.
    """
    log_level = level if level is not None else _log_level()

    sk_logger = logging.getLogger(_LOGGER_NAME)
    sk_logger.setLevel(log_level)
    sk_logger.propagate = True

    # Root stays at WARNING for third-party noise; our records still reach
    # its handlers through propagation.
    root_logger = logging.getLogger()
    if root_logger.level > logging.WARNING or root_logger.level == logging.NOTSET:
        root_logger.setLevel(logging.WARNING)

    log_path = _log_path()
    log_path.parent.mkdir(parents=True, exist_ok=True)

    file_formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(name)s - %(message)s")
    console_formatter = logging.Formatter("%(levelname)s: %(message)s")

    if not _has_handler(root_logger, "file"):
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=5 * 1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.seqkit_handler = "file"
        file_handler.setLevel(logging.INFO)
        file_handler.setFormatter(file_formatter)
        root_logger.addHandler(file_handler)
        sk_logger.debug("Logging to %s", log_path)

    if enable_console:
        if not _has_handler(root_logger, "console"):
            console_handler = logging.StreamHandler()
            console_handler.seqkit_handler = "console"
            console_handler.setLevel(log_level)
            console_handler.setFormatter(console_formatter)
            root_logger.addHandler(console_handler)
    else:
        for handler in list(root_logger.handlers):
            if getattr(handler, "seqkit_handler", None) == "console":
                root_logger.removeHandler(handler)

    return log_path
