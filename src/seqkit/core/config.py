"""Configuration classes using Builder pattern for sequence operations."""

from dataclasses import dataclass, field, replace
from typing import Optional

from seqkit import constants
from seqkit.exceptions import ConfigurationError


@dataclass(frozen=True)
class OutputPathOptions:
    """Options for deriving an output path from a sequence template path."""

    pad: str = constants.DEFAULT_PAD  # "%" printf, "" drops the frame token
    suffix: str = ""
    prefix: str = ""
    extension: Optional[str] = None  # None keeps the source extension
    directory: Optional[str] = None  # None keeps the source directory

    def __post_init__(self) -> None:
        """Validate configuration."""
        for name in ("pad", "suffix", "prefix"):
            value = getattr(self, name)
            if "/" in value or "\\" in value:
                raise ConfigurationError(f"{name} cannot contain path separators: {value!r}")
        if self.extension and ("/" in self.extension or "\\" in self.extension):
            raise ConfigurationError(
                f"extension cannot contain path separators: {self.extension!r}"
            )

    @property
    def normalized_extension(self) -> Optional[str]:
        """Extension with a leading dot, or None."""
        if not self.extension:
            return None
        return self.extension if self.extension.startswith(".") else f".{self.extension}"

    def merged(self, **overrides: object) -> "OutputPathOptions":
        """Return a copy with the given non-None fields replaced."""
        values = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **values)


@dataclass
class SearchConfig:
    """Configuration for enumerating candidate files."""

    root: str = "."
    include: list[str] = field(default_factory=lambda: list(constants.DEFAULT_INCLUDE))
    exclude: list[str] = field(default_factory=lambda: list(constants.DEFAULT_EXCLUDE))
    recurse: bool = True

    def __post_init__(self) -> None:
        """Validate configuration."""
        if not self.root:
            raise ConfigurationError("Search root is required")
        if not self.include:
            raise ConfigurationError("At least one include pattern is required")


@dataclass
class ImageConversionConfig:
    """Configuration for converting sequences with oiiotool."""

    output_options: OutputPathOptions = field(
        default_factory=lambda: OutputPathOptions(extension=constants.DEFAULT_CONVERT_EXTENSION)
    )
    extra_args: list[str] = field(default_factory=list)
    executable: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        options = self.output_options
        if not isinstance(options, OutputPathOptions):
            raise ConfigurationError("output_options must be an OutputPathOptions instance")
        if (
            options.pad == constants.DEFAULT_PAD
            and not options.normalized_extension
            and not options.directory
            and not options.prefix
            and not options.suffix
        ):
            raise ConfigurationError(
                "Output options would reproduce the source path; "
                "set an extension, directory, prefix, suffix or pad"
            )
        if not all(isinstance(arg, str) for arg in self.extra_args):
            raise ConfigurationError("Extra arguments must be strings")
        if self.executable is not None and not self.executable.strip():
            raise ConfigurationError("Executable cannot be empty")


@dataclass
class VideoEncodeConfig:
    """Configuration for encoding sequences to video with FFmpeg."""

    framerate: float = constants.DEFAULT_FRAMERATE
    output_options: OutputPathOptions = field(
        default_factory=lambda: OutputPathOptions(
            pad="", extension=constants.DEFAULT_VIDEO_EXTENSION
        )
    )
    extra_args: list[str] = field(default_factory=list)
    overwrite: bool = True

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.framerate <= 0:
            raise ConfigurationError("Frame rate must be greater than 0")
        extension = self.output_options.normalized_extension
        if extension is None:
            raise ConfigurationError("Video output needs an extension (e.g. .mp4)")
        if extension.lstrip(".").lower() not in constants.SUPPORTED_VIDEO_EXTENSIONS:
            supported = ", ".join(sorted(constants.SUPPORTED_VIDEO_EXTENSIONS))
            raise ConfigurationError(
                f"Unsupported video extension: {extension}. Supported: {supported}"
            )


class SearchConfigBuilder:
    """Builder for SearchConfig."""

    def __init__(self) -> None:
        """Initialize the builder."""
        self._root = "."
        self._include: list[str] = list(constants.DEFAULT_INCLUDE)
        self._exclude: list[str] = list(constants.DEFAULT_EXCLUDE)
        self._recurse = True

    def with_root(self, root: str) -> "SearchConfigBuilder":
        """Set the directory to search."""
        self._root = root
        return self

    def with_include(self, patterns: list[str]) -> "SearchConfigBuilder":
        """Set the file name globs to consider."""
        self._include = list(patterns)
        return self

    def with_exclude(self, patterns: list[str]) -> "SearchConfigBuilder":
        """Set the file name globs to skip."""
        self._exclude = list(patterns)
        return self

    def with_recurse(self, recurse: bool = True) -> "SearchConfigBuilder":
        """Search subdirectories."""
        self._recurse = recurse
        return self

    def build(self) -> SearchConfig:
        """Build the SearchConfig object."""
        return SearchConfig(
            root=self._root,
            include=self._include,
            exclude=self._exclude,
            recurse=self._recurse,
        )

class ImageConversionConfigBuilder:
    """Builder for ImageConversionConfig."""

    def __init__(self) -> None:
        """Initialize the builder."""
        self._output_options = OutputPathOptions(extension=constants.DEFAULT_CONVERT_EXTENSION)
        self._extra_args: list[str] = []
        self._executable: Optional[str] = None

    def with_output_options(self, options: OutputPathOptions) -> "ImageConversionConfigBuilder":
        """Replace the output path options."""
        self._output_options = options
        return self

    def with_extension(self, extension: str) -> "ImageConversionConfigBuilder":
        """Set the output extension."""
        self._output_options = self._output_options.merged(extension=extension)
        return self

    def with_pad(self, pad: str) -> "ImageConversionConfigBuilder":
        """Set the output placeholder style."""
        self._output_options = self._output_options.merged(pad=pad)
        return self

    def with_output_directory(self, directory: str) -> "ImageConversionConfigBuilder":
        """Set the output directory."""
        self._output_options = self._output_options.merged(directory=directory)
        return self

    def with_extra_args(self, args: list[str]) -> "ImageConversionConfigBuilder":
        """Set extra oiiotool arguments, inserted before the output."""
        self._extra_args = list(args)
        return self

    def with_executable(self, executable: str) -> "ImageConversionConfigBuilder":
        """Use a specific oiiotool executable."""
        self._executable = executable
        return self

    def build(self) -> ImageConversionConfig:
        """Build the ImageConversionConfig object."""
        return ImageConversionConfig(
            output_options=self._output_options,
            extra_args=self._extra_args,
            executable=self._executable,
        )


class VideoEncodeConfigBuilder:
    """Builder for VideoEncodeConfig."""

    def __init__(self) -> None:
        """Initialize the builder."""
        self._framerate: float = constants.DEFAULT_FRAMERATE
        self._output_options = OutputPathOptions(
            pad="", extension=constants.DEFAULT_VIDEO_EXTENSION
        )
        self._extra_args: list[str] = []
        self._overwrite: bool = True

    def with_framerate(self, framerate: float) -> "VideoEncodeConfigBuilder":
        """Set the frame rate."""
        self._framerate = framerate
        return self

    def with_output_options(self, options: OutputPathOptions) -> "VideoEncodeConfigBuilder":
        """Replace the output path options."""
        self._output_options = options
        return self

    def with_extension(self, extension: str) -> "VideoEncodeConfigBuilder":
        """Set the video container extension."""
        self._output_options = self._output_options.merged(extension=extension)
        return self

    def with_output_directory(self, directory: str) -> "VideoEncodeConfigBuilder":
        """Set the output directory."""
        self._output_options = self._output_options.merged(directory=directory)
        return self

    def with_extra_args(self, args: list[str]) -> "VideoEncodeConfigBuilder":
        """Set extra FFmpeg arguments, inserted before the output."""
        self._extra_args = list(args)
        return self

    def with_overwrite(self, overwrite: bool = True) -> "VideoEncodeConfigBuilder":
        """Allow replacing existing videos."""
        self._overwrite = overwrite
        return self

    def build(self) -> VideoEncodeConfig:
        """Build the VideoEncodeConfig object."""
        return VideoEncodeConfig(
            framerate=self._framerate,
            output_options=self._output_options,
            extra_args=self._extra_args,
            overwrite=self._overwrite,
        )
