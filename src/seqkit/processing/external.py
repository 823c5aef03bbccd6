"""Blocking execution of external command-line tools."""

import logging
import subprocess
from typing import Sequence

from seqkit.core.ffmpeg_utils import popen_kwargs
from seqkit.exceptions import ExternalToolFailure

logger = logging.getLogger(__name__)


def format_command(cmd: Sequence[str]) -> str:
    """Return a shell-like string for logging a command."""
    return subprocess.list2cmdline(list(cmd))


def run_external_tool(
    cmd: Sequence[str],
    error_cls: type[ExternalToolFailure] = ExternalToolFailure,
    capture_output: bool = False,
) -> subprocess.CompletedProcess:
    """Run a command and wait for it to exit.

    Args:
        cmd: Executable followed by its arguments
        error_cls: Exception type raised on failure
        capture_output: Capture stdout/stderr instead of inheriting them

    Returns:
        The completed process

    Raises:
        ExternalToolFailure: If the executable is missing or exits non-zero
    """
    cmd = [str(part) for part in cmd]
    logger.info("Running: %s", format_command(cmd))
    try:
        result = subprocess.run(
            cmd,
            capture_output=capture_output,
            text=True,
            **popen_kwargs(prevent_sigint=True),
        )
    except FileNotFoundError as exc:
        raise error_cls(f"Executable not found: {cmd[0]}", command=cmd) from exc
    except OSError as exc:
        raise error_cls(f"Failed to start {cmd[0]}: {exc}", command=cmd) from exc

    if result.returncode != 0:
        details = (result.stderr or "").strip() if capture_output else ""
        message = f"{cmd[0]} exited with code {result.returncode}"
        if details:
            message = f"{message}\n{details}"
        raise error_cls(message, command=cmd, returncode=result.returncode)

    return result
