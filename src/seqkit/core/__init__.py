"""Core modules for sequence detection and path templates."""

from seqkit.core.config import OutputPathOptions
from seqkit.core.frame_range import FrameBounds, compress_frames, expand_bounds, expand_frames
from seqkit.core.path_parser import ParsedPathComponents, parse_sequence_path
from seqkit.core.path_template import format_sequence_path
from seqkit.core.sequence import (
    SequenceAggregator,
    SequenceDescriptor,
    SequenceDescriptorWithOutput,
    aggregate_sequences,
    with_output,
)

__all__ = [
    "FrameBounds",
    "OutputPathOptions",
    "ParsedPathComponents",
    "SequenceAggregator",
    "SequenceDescriptor",
    "SequenceDescriptorWithOutput",
    "aggregate_sequences",
    "compress_frames",
    "expand_bounds",
    "expand_frames",
    "format_sequence_path",
    "parse_sequence_path",
    "with_output",
]
