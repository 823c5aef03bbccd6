"""File I/O utilities."""

import fnmatch
import logging
from pathlib import Path

from seqkit.core.config import SearchConfig

logger = logging.getLogger(__name__)


class FileUtils:
    """Utility class for file operations."""

    @staticmethod
    def ensure_directory(path: Path) -> None:
        """Ensure a directory exists, creating it if necessary.

        Args:
            path: Path to the directory
        """
        path.mkdir(parents=True, exist_ok=True)

    @staticmethod
    def matches_any(name: str, patterns: list[str]) -> bool:
        """Check a filename against glob patterns."""
        return any(fnmatch.fnmatch(name, pattern) for pattern in patterns)

    @staticmethod
    def find_files(config: SearchConfig) -> list[str]:
        """Find files under a root using include/exclude globs.

        Patterns are matched against file names. Directories are never
        returned.

        Args:
            config: Search settings

        Returns:
            Sorted absolute file paths
        """
        root = Path(config.root).expanduser().absolute()
        if not root.exists():
            logger.warning(f"Directory does not exist: {root}")
            return []

        entries = root.rglob("*") if config.recurse else root.glob("*")
        files = [
            str(entry)
            for entry in entries
            if entry.is_file()
            and FileUtils.matches_any(entry.name, config.include)
            and not FileUtils.matches_any(entry.name, config.exclude)
        ]
        files.sort()
        logger.debug(f"Found {len(files)} file(s) under {root}")
        return files

    @staticmethod
    def validate_output_path(path: Path, overwrite: bool = False) -> bool:
        """Validate that output path can be written to.

        Args:
            path: Output file path
            overwrite: Whether to allow overwriting existing files

        Returns:
            True if path is valid for writing
        """
        if path.exists() and not overwrite:
            logger.warning(f"Output file already exists: {path}")
            return False

        # Ensure parent directory exists
        FileUtils.ensure_directory(path.parent)
        return True
