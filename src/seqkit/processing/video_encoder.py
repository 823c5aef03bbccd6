"""Video encoding using FFmpeg."""

import logging
from pathlib import Path
from typing import Optional

from seqkit.core.config import VideoEncodeConfig
from seqkit.core.ffmpeg_utils import get_ffmpeg_exe
from seqkit.core.sequence import SequenceDescriptor, SequenceDescriptorWithOutput, with_output
from seqkit.exceptions import VideoEncodingError
from seqkit.io.file_utils import FileUtils
from seqkit.processing.external import run_external_tool

logger = logging.getLogger(__name__)


def _format_framerate(framerate: float) -> str:
    return str(int(framerate)) if float(framerate).is_integer() else f"{framerate:g}"


class VideoEncoder:
    """Video encoder for turning image sequences into movie files with FFmpeg."""

    def __init__(self, config: Optional[VideoEncodeConfig] = None) -> None:
        """Initialize video encoder.

        Args:
            config: Encode settings (defaults to 24 fps MP4 next to the frames)
        """
        self.config = config or VideoEncodeConfig()
        self._executable: Optional[str] = None

    @property
    def executable(self) -> str:
        if self._executable is None:
            self._executable = get_ffmpeg_exe()
        return self._executable

    def prepare(self, sequence: SequenceDescriptor) -> SequenceDescriptorWithOutput:
        """Derive the output video path for a sequence."""
        return with_output(sequence, self.config.output_options)

    def build_command(self, sequence: SequenceDescriptorWithOutput) -> list[str]:
        """Build the FFmpeg command line for a prepared sequence."""
        return [
            self.executable,
            "-y",
            "-r",
            _format_framerate(self.config.framerate),
            "-start_number",
            str(sequence.first),
            "-i",
            sequence.path,
            *self.config.extra_args,
            sequence.output,
        ]

    def encode(self, sequence: SequenceDescriptor) -> Optional[SequenceDescriptorWithOutput]:
        """Encode a sequence and wait for FFmpeg to finish.

        Args:
            sequence: Sequence to encode

        Returns:
            The sequence with its output path, or None if the output exists
            and overwriting is disabled

        Raises:
            VideoEncodingError: If FFmpeg is missing or fails
        """
        prepared = self.prepare(sequence)
        if prepared.output == prepared.path:
            raise VideoEncodingError(f"Could not derive a video path from {prepared.path}")

        if not FileUtils.validate_output_path(Path(prepared.output), self.config.overwrite):
            return None

        if not prepared.is_contiguous:
            # the image2 demuxer stops at the first missing frame
            logger.warning(
                f"{prepared.path} has gaps [{prepared.frames}]; "
                f"FFmpeg will stop at the first missing frame."
            )

        logger.info(f"Encoding {prepared.path} [{prepared.frames}] -> {prepared.output}")
        run_external_tool(self.build_command(prepared), error_cls=VideoEncodingError)
        logger.info("Video encoding completed.")
        return prepared
