"""Image sequence conversion using oiiotool."""

import logging
from pathlib import Path
from typing import Optional

from seqkit.core.config import ImageConversionConfig
from seqkit.core.ffmpeg_utils import get_oiiotool_exe
from seqkit.core.sequence import SequenceDescriptor, SequenceDescriptorWithOutput, with_output
from seqkit.exceptions import ImageConversionError
from seqkit.io.file_utils import FileUtils
from seqkit.processing.external import run_external_tool

logger = logging.getLogger(__name__)


class ImageConverter:
    """Converts whole sequences to another format with one oiiotool call each."""

    def __init__(self, config: Optional[ImageConversionConfig] = None) -> None:
        """Initialize image converter.

        Args:
            config: Conversion settings (defaults convert to PNG in place)
        """
        self.config = config or ImageConversionConfig()
        self._executable: Optional[str] = None

    @property
    def executable(self) -> str:
        if self._executable is None:
            self._executable = get_oiiotool_exe(self.config.executable)
        return self._executable

    def prepare(self, sequence: SequenceDescriptor) -> SequenceDescriptorWithOutput:
        """Derive the output path for a sequence."""
        return with_output(sequence, self.config.output_options)

    def build_command(self, sequence: SequenceDescriptorWithOutput) -> list[str]:
        """Build the oiiotool command line for a prepared sequence."""
        return [
            self.executable,
            sequence.path,
            "--frames",
            sequence.frames,
            *self.config.extra_args,
            "-v",
            "-o",
            sequence.output,
        ]

    def convert(self, sequence: SequenceDescriptor) -> SequenceDescriptorWithOutput:
        """Convert a sequence and wait for oiiotool to finish.

        Args:
            sequence: Sequence to convert

        Returns:
            The sequence with its output path

        Raises:
            ImageConversionError: If oiiotool is missing or fails
        """
        prepared = self.prepare(sequence)
        if prepared.output == prepared.path:
            raise ImageConversionError(
                f"Output path would overwrite the source sequence: {prepared.path}"
            )

        output_dir = Path(prepared.output).parent
        FileUtils.ensure_directory(output_dir)

        logger.info(f"Converting {prepared.path} [{prepared.frames}] -> {prepared.output}")
        run_external_tool(self.build_command(prepared), error_cls=ImageConversionError)
        return prepared
