"""I/O modules for file enumeration."""

from seqkit.io.file_utils import FileUtils

__all__ = ["FileUtils"]
