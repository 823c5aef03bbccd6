"""Rewrite the frame placeholder and naming of sequence paths."""

import os
import re
from dataclasses import dataclass
from typing import Optional

from seqkit.core.config import OutputPathOptions

# A frame token follows "." or "_" and is directly followed by ".".
# The trailing dot is a lookahead so adjacent tokens are all found.
FRAME_TOKEN_PATTERN = re.compile(
    r"(?P<separator>[._])(?:(?P<run>[0-9]+|#+)|%0(?P<width>[0-9]{1,2})d)(?=\.)"
)

_SEPARATORS = ("/", "\\")


@dataclass(frozen=True)
class FrameToken:
    """Frame token located in a filename."""

    separator: str
    start: int
    end: int
    padding: int


def find_frame_token(filename: str) -> Optional[FrameToken]:
    """Locate the last frame token in a filename.

    Digit and ``#`` runs give their own length as padding, ``%0Nd`` gives N.
    """
    token = None
    for token in FRAME_TOKEN_PATTERN.finditer(filename):
        pass
    if token is None:
        return None

    if token.group("width") is not None:
        padding = int(token.group("width"))
    else:
        padding = len(token.group("run"))
    return FrameToken(token.group("separator"), token.start(), token.end(), padding)


def split_path(path: str) -> tuple[str, str, str]:
    """Split a path into (directory, stem, extension).

    The directory keeps its trailing separator so the parts concatenate back
    to the input.
    """
    cut = max(path.rfind(sep) for sep in _SEPARATORS) + 1
    directory, filename = path[:cut], path[cut:]
    stem, extension = os.path.splitext(filename)
    return directory, stem, extension


def make_placeholder(pad: str, separator: str, padding: int) -> str:
    """Build the replacement placeholder for a frame token."""
    if pad == "%":
        return f"{separator}%0{padding}d"
    if pad == "":
        return ""
    return separator + pad * padding


def format_sequence_path(
    path: str,
    pad: str = "%",
    suffix: str = "",
    prefix: str = "",
    extension: Optional[str] = None,
    directory: Optional[str] = None,
) -> str:
    """Rewrite a sequence path with a new placeholder and naming.

    Works on frame instances (``shot.0001.exr``) as well as templates
    (``shot.%04d.exr``, ``shot.####.exr``).

    Args:
        path: Source path
        pad: ``"%"`` for printf style, ``""`` to drop the frame token,
            anything else is repeated to the padding width
        suffix: Text inserted in front of the new placeholder
        prefix: Text inserted in front of the filename
        extension: Replacement extension, leading dot optional
        directory: Replacement directory

    Returns:
        Rewritten path, or ``path`` unchanged if it holds no frame token.

    Example:
        >>> format_sequence_path("test.1234.exr")
        'test.%04d.exr'
        >>> format_sequence_path("test.%05d.exr", pad="#", extension="png")
        'test.#####.png'
    """
    old_directory, stem, old_extension = split_path(path)
    token = find_frame_token(stem + old_extension)
    if token is None:
        return path

    if extension:
        new_extension = extension if extension.startswith(".") else f".{extension}"
    else:
        new_extension = old_extension

    if directory:
        new_directory = directory if directory.endswith(_SEPARATORS) else directory + os.sep
    else:
        new_directory = old_directory

    name = f"{prefix}{stem}{new_extension}"
    start = len(prefix) + token.start
    # skip the dot that follows the token, it is re-added below
    end = len(prefix) + token.end + 1
    placeholder = make_placeholder(pad, token.separator, token.padding)

    return f"{new_directory}{name[:start]}{suffix}{placeholder}.{name[end:]}"


def format_with_options(path: str, options: OutputPathOptions) -> str:
    """Apply :func:`format_sequence_path` with an options record."""
    return format_sequence_path(
        path,
        pad=options.pad,
        suffix=options.suffix,
        prefix=options.prefix,
        extension=options.extension,
        directory=options.directory,
    )
