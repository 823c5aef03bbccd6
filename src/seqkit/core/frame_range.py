"""Compact frame range strings such as ``1-4,7,9-10``."""

import re
from typing import NamedTuple, Sequence

from seqkit.exceptions import FrameRangeError

_DELIMITERS = re.compile(r"[-,]")
_RANGE_ITEM = re.compile(r"^(\d+)(?:-(\d+))?$")


class FrameBounds(NamedTuple):
    """First/last frame and member count decoded from a range string."""

    first: int
    last: int
    count: int


def compress_frames(frames: Sequence[int]) -> str:
    """Encode frame numbers into a compact range string.

    Frames are emitted in input order, so callers must sort them ascending
    to get the canonical form.

    Args:
        frames: Frame numbers, sorted ascending

    Returns:
        Range string, e.g. ``[1, 2, 3, 4, 7, 9, 10]`` -> ``"1-4,7,9-10"``
    """
    if not frames:
        return ""

    parts = [str(frames[0])]
    last_value = frames[0]
    continuing = False

    for frame in frames[1:]:
        if frame == last_value + 1:
            continuing = True
        else:
            if continuing:
                parts.append(f"-{last_value}")
            parts.append(f",{frame}")
            continuing = False
        last_value = frame

    if continuing:
        parts.append(f"-{last_value}")

    return "".join(parts)


def _tokens(frames: str) -> list[str]:
    text = frames.strip()
    if not text:
        raise FrameRangeError("Frame range is empty")
    tokens = [token.strip() for token in _DELIMITERS.split(text)]
    if not all(token.isdigit() for token in tokens):
        raise FrameRangeError(f"Invalid frame range: {frames!r}")
    return tokens


def expand_bounds(frames: str) -> FrameBounds:
    """Decode a range string into first, last and count.

    ``count`` is ``last - first + 1``, which only matches the real number of
    members for a single value or a single contiguous range. Broken ranges
    overcount: ``"1-4,7,9-10"`` gives ``(1, 10, 10)``. Use :func:`count_frames`
    for the exact value.

    Raises:
        FrameRangeError: If the string is empty or not made of integers
    """
    tokens = _tokens(frames)
    if len(tokens) == 1:
        value = int(tokens[0])
        return FrameBounds(value, value, 1)

    first = int(tokens[0])
    last = int(tokens[-1])
    return FrameBounds(first, last, last - first + 1)


def expand_frames(frames: str) -> list[int]:
    """Expand a range string into every frame number it names, in order.

    Raises:
        FrameRangeError: If an item is malformed or a range runs backwards
    """
    _tokens(frames)

    result: list[int] = []
    for item in frames.split(","):
        match = _RANGE_ITEM.match(item.strip())
        if match is None:
            raise FrameRangeError(f"Invalid frame range item: {item!r}")
        start = int(match.group(1))
        end = int(match.group(2)) if match.group(2) is not None else start
        if end < start:
            raise FrameRangeError(f"Descending frame range: {item!r}")
        result.extend(range(start, end + 1))
    return result


def count_frames(frames: str) -> int:
    """Return the exact number of frames named by a range string."""
    return len(expand_frames(frames))
