"""Custom exceptions for the SeqKit package."""

from typing import Optional, Sequence


class SeqKitError(Exception):
    """Base exception for all SeqKit errors."""

    pass


class FrameRangeError(SeqKitError):
    """Raised when a frame range string cannot be parsed."""

    pass


class ConfigurationError(SeqKitError):
    """Raised when configuration is invalid."""

    pass


class ExternalToolFailure(SeqKitError):
    """Raised when an external executable is missing or exits with an error."""

    def __init__(
        self,
        message: str,
        command: Optional[Sequence[str]] = None,
        returncode: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.command = list(command) if command is not None else []
        self.returncode = returncode


class ImageConversionError(ExternalToolFailure):
    """Raised when image conversion fails."""

    pass


class VideoEncodingError(ExternalToolFailure):
    """Raised when video encoding fails."""

    pass


class ViewerError(ExternalToolFailure):
    """Raised when the sequence viewer cannot be launched."""

    pass
