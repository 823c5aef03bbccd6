"""Split a file path into directory, basename, frame number and extension."""

import re
from dataclasses import dataclass
from typing import Optional

# directory: greedy, up to the last path separator
# basename: greedy, up to the last "." or "_" in front of the frame digits
# frame: digit run directly after the basename, optional
# extension: dotted groups; inner groups need a letter after at most one digit
SEQUENCE_PATH_PATTERN = re.compile(
    r"(?P<directory>(?:.*[\\/])?)"
    r"(?P<basename>(?:[^\\/]*[._])?)"
    r"(?P<frame>[0-9]+)?"
    r"(?P<extension>(?:(?:\.[0-9]?[A-Za-z][A-Za-z0-9]*)*\.\w+)?)"
)


@dataclass(frozen=True)
class ParsedPathComponents:
    """Components of a path matched against the sequence grammar."""

    directory: str
    basename: str
    frame: Optional[str]
    extension: str

    @property
    def padding(self) -> int:
        """Width of the frame digit run (0 when there is no frame)."""
        return len(self.frame) if self.frame else 0

    @property
    def frame_number(self) -> Optional[int]:
        return int(self.frame) if self.frame else None

    def template_path(self) -> str:
        """Return the path with the frame digits replaced by ``%0Nd``.

        Files sharing a template path belong to the same sequence.
        """
        placeholder = f"%0{self.padding}d" if self.frame else ""
        return f"{self.directory}{self.basename}{placeholder}{self.extension}"

    def __str__(self) -> str:
        return f"{self.directory}{self.basename}{self.frame or ''}{self.extension}"


def parse_sequence_path(path: str) -> Optional[ParsedPathComponents]:
    """Parse a path into sequence components.

    Args:
        path: File path, with either separator style

    Returns:
        ParsedPathComponents, or None if the path does not fit the grammar.
        A path that fits but has no frame digits gets ``frame=None``.
    """
    match = SEQUENCE_PATH_PATTERN.fullmatch(path)
    if match is None:
        return None

    return ParsedPathComponents(
        directory=match.group("directory"),
        basename=match.group("basename"),
        frame=match.group("frame"),
        extension=match.group("extension"),
    )


def is_sequence_member(path: str) -> bool:
    """Check whether a path carries a frame number in the expected position."""
    parsed = parse_sequence_path(path)
    return parsed is not None and parsed.frame is not None
