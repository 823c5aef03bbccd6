"""Example: Using the Python API programmatically."""

from seqkit import SeqKit
from seqkit.core.config import (
    ImageConversionConfigBuilder,
    OutputPathOptions,
    SearchConfig,
    VideoEncodeConfigBuilder,
)
from seqkit.core.frame_range import expand_bounds
from seqkit.core.path_template import format_sequence_path

kit = SeqKit()

# Method 1: List the EXR sequences under a render directory
sequences = kit.get_sequences(SearchConfig(root="renders", include=["*.exr"]))
for seq in sequences:
    print(f"{seq.path} [{seq.frames}] {seq.count} frames")

# Method 2: Convert to JPEG proxies in another directory
config = (
    ImageConversionConfigBuilder()
    .with_extension("jpg")
    .with_output_directory("proxies")
    .with_extra_args(["--colorconvert", "linear", "sRGB"])
    .build()
)
kit.convert_sequences(sequences, config)

# Method 3: Encode the proxies at 25 fps
proxies = kit.get_sequences(SearchConfig(root="proxies", include=["*.jpg"]))
kit.encode_sequences(proxies, VideoEncodeConfigBuilder().with_framerate(25).build())

# Path templates and frame ranges on their own
print(format_sequence_path("renders/shot.1001.exr", pad="#"))  # renders/shot.####.exr
print(kit.add_output(sequences, OutputPathOptions(pad="", extension="mov")))
print(expand_bounds("1001-1100"))  # FrameBounds(first=1001, last=1100, count=100)
