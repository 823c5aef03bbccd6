"""Open sequences in an external image viewer."""

import logging
from typing import Optional

from seqkit.core.ffmpeg_utils import get_viewer_exe
from seqkit.core.path_template import format_sequence_path
from seqkit.core.sequence import SequenceDescriptor
from seqkit.exceptions import ViewerError
from seqkit.processing.external import run_external_tool

logger = logging.getLogger(__name__)


class SequenceViewer:
    """Launches a viewer for a sequence and waits for it to close."""

    def __init__(self, executable: Optional[str] = None, pad: str = "#") -> None:
        """Initialize viewer.

        Args:
            executable: Viewer executable (default: SEQKIT_VIEWER or first found on PATH)
            pad: Placeholder style handed to the viewer
        """
        self._explicit = executable
        self.pad = pad

    def build_command(self, sequence: SequenceDescriptor) -> list[str]:
        executable = get_viewer_exe(self._explicit)
        if executable is None:
            raise ViewerError("No sequence viewer found. Set SEQKIT_VIEWER to a viewer executable.")
        return [executable, format_sequence_path(sequence.path, pad=self.pad)]

    def view(self, sequence: SequenceDescriptor) -> None:
        """Open a sequence and block until the viewer exits.

        Raises:
            ViewerError: If no viewer is available or it fails
        """
        logger.info(f"Viewing {sequence}")
        run_external_tool(self.build_command(sequence), error_cls=ViewerError)
