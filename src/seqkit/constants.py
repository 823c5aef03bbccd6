"""Centralized constants for seqkit."""

# Environment
ENV_LOG_LEVEL = "SEQKIT_LOG_LEVEL"
ENV_LOG_PATH = "SEQKIT_LOG_PATH"
ENV_OIIOTOOL = "SEQKIT_OIIOTOOL"
ENV_VIEWER = "SEQKIT_VIEWER"
ENV_FFMPEG = "IMAGEIO_FFMPEG_EXE"

# Executables
OIIOTOOL_NAME = "oiiotool"
VIEWER_CANDIDATES = [
    "mrv2",
    "djv",
    "rv",
]

# Enumeration
DEFAULT_INCLUDE = ["*"]
DEFAULT_EXCLUDE: list[str] = []

# Output paths
DEFAULT_PAD = "%"
DEFAULT_CONVERT_EXTENSION = ".png"
DEFAULT_VIDEO_EXTENSION = ".mp4"

# Encoding
DEFAULT_FRAMERATE = 24.0

# Supported Formats
SUPPORTED_VIDEO_EXTENSIONS = {"mp4", "mkv", "mov", "avi", "webm"}
