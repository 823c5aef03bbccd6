"""Public Python API for SeqKit."""

import logging
import os
from collections.abc import Sequence
from typing import Optional

from tqdm import tqdm

from seqkit.core.config import (
    ImageConversionConfig,
    OutputPathOptions,
    SearchConfig,
    VideoEncodeConfig,
)
from seqkit.core.sequence import (
    SequenceDescriptor,
    SequenceDescriptorWithOutput,
    aggregate_sequences,
    with_outputs,
)
from seqkit.io.file_utils import FileUtils
from seqkit.logging_utils import setup_logging
from seqkit.processing.image_converter import ImageConverter
from seqkit.processing.video_encoder import VideoEncoder
from seqkit.processing.viewer import SequenceViewer

logger = logging.getLogger("seqkit.api.processor")


class SeqKit:
    """Main public API for sequence discovery, conversion and encoding."""

    def __init__(self, configure_logging: bool = True) -> None:
        """Initialize SeqKit.

        Args:
            configure_logging: Install the default file and console handlers
        """
        if configure_logging:
            setup_logging()

    def get_sequences(
        self,
        search: Optional[SearchConfig] = None,
        working_dir: Optional[str] = None,
    ) -> list[SequenceDescriptor]:
        """Find files and group them into sequences.

        Args:
            search: Root and include/exclude globs (default: current directory, recursive)
            working_dir: Prefix stripped from displayed paths. Defaults to the
                current directory; pass "" to keep absolute paths.

        Returns:
            Sequences ordered by template path

        Example:
            >>> kit = SeqKit()
            >>> for seq in kit.get_sequences(SearchConfig(root="renders", include=["*.exr"])):
            ...     print(seq.path, seq.frames)
        """
        search = search or SearchConfig()
        if working_dir is None:
            working_dir = os.getcwd()

        files = FileUtils.find_files(search)
        sequences = aggregate_sequences(files, working_dir=working_dir)
        logger.info(f"Found {len(sequences)} sequence(s) in {len(files)} file(s)")
        return sequences

    def add_output(
        self, sequences: Sequence[SequenceDescriptor], options: OutputPathOptions
    ) -> list[SequenceDescriptorWithOutput]:
        """Attach derived output paths to sequences."""
        return with_outputs(sequences, options)

    def convert_sequences(
        self,
        sequences: Sequence[SequenceDescriptor],
        config: Optional[ImageConversionConfig] = None,
        show_progress: bool = True,
    ) -> list[SequenceDescriptorWithOutput]:
        """Convert sequences one after another with oiiotool.

        Raises:
            ImageConversionError: On the first failing conversion
        """
        converter = ImageConverter(config)
        results = []
        for sequence in tqdm(
            sequences,
            desc="Converting",
            unit="seq",
            disable=not show_progress or len(sequences) < 2,
        ):
            results.append(converter.convert(sequence))
        return results

    def encode_sequences(
        self,
        sequences: Sequence[SequenceDescriptor],
        config: Optional[VideoEncodeConfig] = None,
        show_progress: bool = True,
    ) -> list[SequenceDescriptorWithOutput]:
        """Encode sequences one after another with FFmpeg.

        Sequences whose video already exists are skipped when the config
        disallows overwriting.

        Raises:
            VideoEncodingError: On the first failing encode
        """
        encoder = VideoEncoder(config)
        results = []
        for sequence in tqdm(
            sequences,
            desc="Encoding",
            unit="seq",
            disable=not show_progress or len(sequences) < 2,
        ):
            encoded = encoder.encode(sequence)
            if encoded is not None:
                results.append(encoded)
        return results

    def view_sequence(
        self, sequence: SequenceDescriptor, executable: Optional[str] = None
    ) -> None:
        """Open a sequence in a viewer and wait for it to close."""
        SequenceViewer(executable).view(sequence)
