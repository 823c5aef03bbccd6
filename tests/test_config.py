"""Tests for configuration objects and builders."""

import pytest

from seqkit.core.config import (
    ImageConversionConfig,
    ImageConversionConfigBuilder,
    OutputPathOptions,
    SearchConfig,
    SearchConfigBuilder,
    VideoEncodeConfig,
    VideoEncodeConfigBuilder,
)
from seqkit.exceptions import ConfigurationError


class TestOutputPathOptions:
    """Tests for OutputPathOptions."""

    def test_defaults(self) -> None:
        options = OutputPathOptions()

        assert options.pad == "%"
        assert options.suffix == ""
        assert options.prefix == ""
        assert options.extension is None
        assert options.directory is None

    def test_normalized_extension(self) -> None:
        assert OutputPathOptions(extension="png").normalized_extension == ".png"
        assert OutputPathOptions(extension=".png").normalized_extension == ".png"
        assert OutputPathOptions().normalized_extension is None

    def test_separator_in_pad_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            OutputPathOptions(pad="/")

    def test_merged_ignores_none(self) -> None:
        options = OutputPathOptions(extension="exr").merged(pad="", extension=None)

        assert options.pad == ""
        assert options.extension == "exr"


class TestSearchConfig:
    """Tests for SearchConfig."""

    def test_defaults(self) -> None:
        config = SearchConfig()

        assert config.root == "."
        assert config.include == ["*"]
        assert config.exclude == []
        assert config.recurse is True

    def test_empty_include_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            SearchConfig(include=[])


class TestImageConversionConfig:
    """Tests for ImageConversionConfig."""

    def test_defaults(self) -> None:
        config = ImageConversionConfig()

        assert config.output_options == OutputPathOptions(extension=".png")
        assert config.extra_args == []
        assert config.executable is None

    def test_output_matching_source_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            ImageConversionConfig(output_options=OutputPathOptions())

    def test_directory_only_allowed(self) -> None:
        config = ImageConversionConfig(output_options=OutputPathOptions(directory="proxies"))

        assert config.output_options.directory == "proxies"

    def test_non_string_extra_args_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            ImageConversionConfig(extra_args=["--resize", 1920])

    def test_empty_executable_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            ImageConversionConfig(executable=" ")

    def test_builder_validates(self) -> None:
        with pytest.raises(ConfigurationError):
            ImageConversionConfigBuilder().with_output_options(OutputPathOptions()).build()


class TestVideoEncodeConfig:
    """Tests for VideoEncodeConfig."""

    def test_defaults(self) -> None:
        config = VideoEncodeConfig()

        assert config.framerate == 24.0
        assert config.output_options == OutputPathOptions(pad="", extension=".mp4")

    def test_framerate_validation(self) -> None:
        with pytest.raises(ConfigurationError):
            VideoEncodeConfig(framerate=0)

    def test_unsupported_extension(self) -> None:
        with pytest.raises(ConfigurationError):
            VideoEncodeConfig(output_options=OutputPathOptions(pad="", extension="gif"))

    def test_missing_extension(self) -> None:
        with pytest.raises(ConfigurationError):
            VideoEncodeConfig(output_options=OutputPathOptions(pad=""))


class TestBuilders:
    """Tests for the configuration builders."""

    def test_image_conversion_builder(self) -> None:
        config = (
            ImageConversionConfigBuilder()
            .with_extension("jpg")
            .with_pad("#")
            .with_output_directory("out")
            .with_extra_args(["--colorconvert", "linear", "sRGB"])
            .with_executable("/opt/oiio/bin/oiiotool")
            .build()
        )

        assert isinstance(config, ImageConversionConfig)
        assert config.output_options == OutputPathOptions(pad="#", extension="jpg", directory="out")
        assert config.extra_args == ["--colorconvert", "linear", "sRGB"]
        assert config.executable == "/opt/oiio/bin/oiiotool"

    def test_image_conversion_builder_defaults(self) -> None:
        config = ImageConversionConfigBuilder().build()

        assert config.output_options.extension == ".png"
        assert config.output_options.pad == "%"

    def test_video_encode_builder(self) -> None:
        config = (
            VideoEncodeConfigBuilder()
            .with_framerate(25)
            .with_extension("mov")
            .with_overwrite(False)
            .build()
        )

        assert config.framerate == 25
        assert config.output_options.extension == "mov"
        assert config.output_options.pad == ""
        assert config.overwrite is False

    def test_video_encode_builder_validates(self) -> None:
        with pytest.raises(ConfigurationError):
            VideoEncodeConfigBuilder().with_framerate(-1).build()

    def test_search_builder(self) -> None:
        config = (
            SearchConfigBuilder()
            .with_root("renders")
            .with_include(["*.exr"])
            .with_exclude(["*_tmp*"])
            .with_recurse(False)
            .build()
        )

        assert config == SearchConfig(
            root="renders", include=["*.exr"], exclude=["*_tmp*"], recurse=False
        )

    def test_search_builder_defaults(self) -> None:
        assert SearchConfigBuilder().build() == SearchConfig()

    def test_search_builder_validates(self) -> None:
        with pytest.raises(ConfigurationError):
            SearchConfigBuilder().with_root("").build()
