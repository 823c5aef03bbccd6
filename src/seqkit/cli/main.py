"""CLI interface for SeqKit."""

import json
import logging
import sys
from dataclasses import asdict
from typing import Optional

import click

from seqkit import __version__, constants
from seqkit.api.processor import SeqKit
from seqkit.core.config import (
    ImageConversionConfigBuilder,
    OutputPathOptions,
    SearchConfigBuilder,
    VideoEncodeConfigBuilder,
)
from seqkit.exceptions import SeqKitError
from seqkit.logging_utils import setup_logging
from seqkit.processing.external import format_command
from seqkit.processing.image_converter import ImageConverter
from seqkit.processing.video_encoder import VideoEncoder

logger = logging.getLogger("seqkit.cli.main")


def _search_options(func):
    """Attach the ROOT argument and file search options shared by every command."""
    func = click.option(
        "--recurse/--no-recurse",
        default=True,
        show_default=True,
        help="Search subdirectories.",
    )(func)
    func = click.option(
        "--exclude",
        "-e",
        multiple=True,
        help="Glob of file names to skip (repeatable).",
    )(func)
    func = click.option(
        "--include",
        "-i",
        multiple=True,
        help="Glob of file names to consider (repeatable, default: *).",
    )(func)
    func = click.argument("root", type=click.Path(file_okay=False), default=".")(func)
    return func


def _find_sequences(root: str, include: tuple, exclude: tuple, recurse: bool):
    builder = (
        SearchConfigBuilder()
        .with_root(root)
        .with_exclude(list(exclude))
        .with_recurse(recurse)
    )
    if include:
        builder.with_include(list(include))
    search = builder.build()
    sequences = SeqKit(configure_logging=False).get_sequences(search)
    if not sequences:
        click.echo("No sequences found.", err=True)
    return sequences


@click.group()
@click.version_option(__version__)
def main() -> None:
    """SeqKit - frame sequence tools."""
    setup_logging()


@main.command(name="ls")
@_search_options
@click.option("--json", "as_json", is_flag=True, default=False, help="Print sequences as JSON.")
def list_sequences(
    root: str, include: tuple, exclude: tuple, recurse: bool, as_json: bool
) -> None:
    """List the frame sequences found under a directory.

    Examples:

    \b
        seqkit ls renders --include "*.exr"
        seqkit ls --json
    """
    try:
        sequences = _find_sequences(root, include, exclude, recurse)
    except SeqKitError as e:
        logger.exception("Sequence listing failed")
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps([asdict(seq) for seq in sequences], indent=2))
        return

    for seq in sequences:
        click.echo(f"{seq.path}  [{seq.frames}]  ({seq.count} frames)")


@main.command()
@_search_options
@click.option(
    "--ext",
    type=str,
    default=constants.DEFAULT_CONVERT_EXTENSION,
    show_default=True,
    help="Output image extension.",
)
@click.option(
    "--pad",
    type=str,
    default=constants.DEFAULT_PAD,
    show_default=True,
    help="Output placeholder: '%' for printf style or a character such as '#'.",
)
@click.option("--prefix", type=str, default="", help="Text added before the file name.")
@click.option("--suffix", type=str, default="", help="Text added before the frame number.")
@click.option("--out-dir", type=str, default=None, help="Output directory (default: source).")
@click.option("--oiiotool", type=str, default=None, help="oiiotool executable to use.")
@click.option("--dry-run", is_flag=True, default=False, help="Print commands without running.")
@click.option(
    "--arg",
    "extra_args",
    multiple=True,
    help="Argument passed to the tool before the output (repeatable).",
)
def convert(
    root: str,
    include: tuple,
    exclude: tuple,
    recurse: bool,
    ext: str,
    pad: str,
    prefix: str,
    suffix: str,
    out_dir: Optional[str],
    oiiotool: Optional[str],
    dry_run: bool,
    extra_args: tuple,
) -> None:
    """Convert image sequences with oiiotool.

    Each --arg is passed to oiiotool before the output, e.g.

    \b
        seqkit convert renders -i "*.exr" --ext jpg --arg=--ch --arg R,G,B
    """
    try:
        builder = (
            ImageConversionConfigBuilder()
            .with_output_options(
                OutputPathOptions(
                    pad=pad, prefix=prefix, suffix=suffix, extension=ext, directory=out_dir
                )
            )
            .with_extra_args(list(extra_args))
        )
        if oiiotool:
            builder.with_executable(oiiotool)
        config = builder.build()

        sequences = _find_sequences(root, include, exclude, recurse)
        if dry_run:
            converter = ImageConverter(config)
            for seq in sequences:
                click.echo(format_command(converter.build_command(converter.prepare(seq))))
            return

        results = SeqKit(configure_logging=False).convert_sequences(sequences, config)
        for result in results:
            click.echo(f"Converted: {result.output}")
    except SeqKitError as e:
        logger.exception("Conversion failed")
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@main.command()
@_search_options
@click.option(
    "--fps",
    type=float,
    default=constants.DEFAULT_FRAMERATE,
    show_default=True,
    help="Frame rate (fps).",
)
@click.option(
    "--ext",
    type=str,
    default=constants.DEFAULT_VIDEO_EXTENSION,
    show_default=True,
    help="Video container extension.",
)
@click.option("--out-dir", type=str, default=None, help="Output directory (default: source).")
@click.option(
    "--overwrite/--no-overwrite",
    default=True,
    show_default=True,
    help="Replace existing videos.",
)
@click.option("--dry-run", is_flag=True, default=False, help="Print commands without running.")
@click.option(
    "--arg",
    "extra_args",
    multiple=True,
    help="Argument passed to the tool before the output (repeatable).",
)
def encode(
    root: str,
    include: tuple,
    exclude: tuple,
    recurse: bool,
    fps: float,
    ext: str,
    out_dir: Optional[str],
    overwrite: bool,
    dry_run: bool,
    extra_args: tuple,
) -> None:
    """Encode image sequences to video with FFmpeg.

    Each --arg is passed to FFmpeg before the output, e.g.

    \b
        seqkit encode proxies -i "*.png" --fps 25 --arg=-c:v --arg libx264
    """
    try:
        builder = (
            VideoEncodeConfigBuilder()
            .with_framerate(fps)
            .with_extension(ext)
            .with_extra_args(list(extra_args))
            .with_overwrite(overwrite)
        )
        if out_dir:
            builder.with_output_directory(out_dir)
        config = builder.build()

        sequences = _find_sequences(root, include, exclude, recurse)
        if dry_run:
            encoder = VideoEncoder(config)
            for seq in sequences:
                click.echo(format_command(encoder.build_command(encoder.prepare(seq))))
            return

        results = SeqKit(configure_logging=False).encode_sequences(sequences, config)
        for result in results:
            click.echo(f"Encoded: {result.output}")
    except SeqKitError as e:
        logger.exception("Encoding failed")
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@main.command()
@_search_options
@click.option("--viewer", type=str, default=None, help="Viewer executable to use.")
def view(root: str, include: tuple, exclude: tuple, recurse: bool, viewer: Optional[str]) -> None:
    """Open each sequence found in a viewer, one at a time."""
    try:
        sequences = _find_sequences(root, include, exclude, recurse)
        kit = SeqKit(configure_logging=False)
        for seq in sequences:
            kit.view_sequence(seq, executable=viewer)
    except SeqKitError as e:
        logger.exception("Viewer failed")
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
