"""Processing modules wrapping oiiotool, FFmpeg and sequence viewers."""

from seqkit.processing.image_converter import ImageConverter
from seqkit.processing.video_encoder import VideoEncoder
from seqkit.processing.viewer import SequenceViewer

__all__ = [
    "ImageConverter",
    "SequenceViewer",
    "VideoEncoder",
]
