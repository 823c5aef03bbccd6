"""Helpers for locating external executables (FFmpeg, oiiotool, viewers)."""

import logging
import os
import shutil
import subprocess
import sys
from typing import Optional, Sequence

import imageio_ffmpeg

from seqkit import constants

logger = logging.getLogger(__name__)


def _exe_name(name: str) -> str:
    return f"{name}.exe" if sys.platform == "win32" else name


def get_ffmpeg_exe() -> str:
    """Return the best FFmpeg executable path for the current environment."""
    env_exe = os.environ.get(constants.ENV_FFMPEG)
    if env_exe:
        return env_exe

    try:
        return imageio_ffmpeg.get_ffmpeg_exe()
    except RuntimeError as exc:
        logger.debug("imageio-ffmpeg has no binary: %s", exc)

    path_exe = shutil.which("ffmpeg")
    if path_exe:
        return path_exe

    return _exe_name("ffmpeg")


def find_executable(
    env_var: str, candidates: Sequence[str], explicit: Optional[str] = None
) -> Optional[str]:
    """Resolve an executable from an explicit value, an env var, then PATH.

    Args:
        env_var: Environment variable that may hold the executable path
        candidates: Executable names tried on PATH, in order
        explicit: Value that takes precedence over everything else

    Returns:
        Executable path, or None if nothing was found
    """
    if explicit:
        return explicit

    env_exe = os.environ.get(env_var)
    if env_exe:
        return env_exe

    for name in candidates:
        path_exe = shutil.which(name)
        if path_exe:
            return path_exe

    logger.debug("No executable found for %s (tried %s)", env_var, ", ".join(candidates))
    return None


def get_oiiotool_exe(explicit: Optional[str] = None) -> str:
    """Return the oiiotool executable path."""
    found = find_executable(constants.ENV_OIIOTOOL, [constants.OIIOTOOL_NAME], explicit)
    return found or _exe_name(constants.OIIOTOOL_NAME)


def get_viewer_exe(explicit: Optional[str] = None) -> Optional[str]:
    """Return a sequence viewer executable, if one is installed."""
    return find_executable(constants.ENV_VIEWER, constants.VIEWER_CANDIDATES, explicit)


def popen_kwargs(prevent_sigint: bool = True) -> dict[str, object]:
    """Return subprocess kwargs tuned for external tool execution."""
    kwargs: dict[str, object] = {}
    if prevent_sigint:
        if os.name == "nt":
            kwargs["creationflags"] = subprocess.CREATE_NEW_PROCESS_GROUP
        else:
            kwargs["start_new_session"] = True
    return kwargs
