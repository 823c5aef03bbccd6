"""Group frame-numbered files into sequences."""

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional

from seqkit.core.config import OutputPathOptions
from seqkit.core.frame_range import compress_frames
from seqkit.core.path_parser import parse_sequence_path
from seqkit.core.path_template import format_with_options

logger = logging.getLogger(__name__)

_PRINTF_PLACEHOLDER = re.compile(r"%0(\d+)d")
_SEPARATORS = ("/", "\\")


@dataclass(frozen=True)
class SequenceDescriptor:
    """A detected frame sequence.

    ``count`` is the number of member files, which differs from
    ``last - first + 1`` when the range has gaps.
    """

    path: str
    frames: str
    first: int
    last: int
    count: int

    @property
    def padding(self) -> int:
        """Frame number width taken from the ``%0Nd`` placeholder."""
        match = self._placeholder()
        return int(match.group(1)) if match else 0

    @property
    def is_contiguous(self) -> bool:
        return self.count == self.last - self.first + 1

    def frame_path(self, frame: int) -> str:
        """Get the file path for a specific frame number.

        Args:
            frame: The frame number

        Returns:
            Path of that frame's file
        """
        match = self._placeholder()
        if match is None:
            return self.path
        frame_str = str(frame).zfill(int(match.group(1)))
        return f"{self.path[:match.start()]}{frame_str}{self.path[match.end():]}"

    def _placeholder(self) -> Optional[re.Match]:
        match = None
        for match in _PRINTF_PLACEHOLDER.finditer(self.path):
            pass
        return match

    def __len__(self) -> int:
        """Return the number of frames in the sequence."""
        return self.count

    def __str__(self) -> str:
        return f"{self.path} [{self.frames}]"


@dataclass(frozen=True)
class SequenceDescriptorWithOutput(SequenceDescriptor):
    """A sequence paired with the output path derived for it."""

    output: str


def _relative_to(path: str, working_dir: Optional[str]) -> str:
    if not working_dir:
        return path
    if working_dir.endswith(_SEPARATORS):
        prefixes = [working_dir]
    else:
        prefixes = [working_dir + sep for sep in _SEPARATORS]
    for prefix in prefixes:
        if path.startswith(prefix):
            return path[len(prefix):]
    return path


class SequenceAggregator:
    """Collapses a flat list of file paths into sequence descriptors."""

    def __init__(self, working_dir: Optional[str] = None) -> None:
        """Initialize aggregator.

        Args:
            working_dir: Directory stripped from the front of displayed
                template paths, usually the caller's current directory
        """
        self.working_dir = working_dir

    def group(self, paths: Iterable[str]) -> dict[str, list[str]]:
        """Group frame digit strings by template path.

        Paths without a frame number are skipped. Repeated paths are kept
        once, otherwise input order is preserved.
        """
        groups: dict[str, dict[str, None]] = {}
        skipped = 0
        for path in paths:
            parsed = parse_sequence_path(path)
            if parsed is None or parsed.frame is None:
                skipped += 1
                continue
            groups.setdefault(parsed.template_path(), {})[parsed.frame] = None

        if skipped:
            logger.debug("Skipped %d file(s) without a frame number", skipped)
        return {key: list(frames) for key, frames in groups.items()}

    def aggregate(self, paths: Iterable[str]) -> list[SequenceDescriptor]:
        """Build sequence descriptors from file paths.

        A path listed more than once counts as one frame, so a descriptor's
        ``count`` can be lower than the number of input paths.

        Args:
            paths: Candidate file paths

        Returns:
            Descriptors ordered by template path
        """
        descriptors = []
        groups = self.group(paths)
        for key in sorted(groups):
            numbers = sorted(int(frame) for frame in groups[key])
            descriptors.append(
                SequenceDescriptor(
                    path=_relative_to(key, self.working_dir),
                    frames=compress_frames(numbers),
                    first=numbers[0],
                    last=numbers[-1],
                    count=len(numbers),
                )
            )

        logger.debug("Detected %d sequence(s)", len(descriptors))
        return descriptors


def aggregate_sequences(
    paths: Iterable[str], working_dir: Optional[str] = None
) -> list[SequenceDescriptor]:
    """Detect sequences in a list of file paths."""
    return SequenceAggregator(working_dir).aggregate(paths)


def with_output(
    descriptor: SequenceDescriptor, options: OutputPathOptions
) -> SequenceDescriptorWithOutput:
    """Attach an output path derived from the descriptor's template path."""
    return SequenceDescriptorWithOutput(
        path=descriptor.path,
        frames=descriptor.frames,
        first=descriptor.first,
        last=descriptor.last,
        count=descriptor.count,
        output=format_with_options(descriptor.path, options),
    )


def with_outputs(
    descriptors: Iterable[SequenceDescriptor], options: OutputPathOptions
) -> list[SequenceDescriptorWithOutput]:
    return [with_output(descriptor, options) for descriptor in descriptors]
