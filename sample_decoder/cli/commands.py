"""CLI command implementations for Sample Decoder."""

import logging
from pathlib import Path

import typer
from rich.console import Console

from sample_decoder.cli.utils import _export_stem, _load_profile, _sanitize_path
from sample_decoder.config import ProfileLoader, ProfileResolver
from sample_decoder.config.generator import ProfileGenerator
from sample_decoder.container import is_self_describing
from sample_decoder.constants import EXIT_NO_DATASET, EXIT_USAGE, VERSION
from sample_decoder.exceptions import ConfigError, UnsupportedEncodingError
from sample_decoder.output import ConsoleOutputHandler, DatasetExporter
from sample_decoder.reader import read_all_datasets

# Configure logging
logging.basicConfig(
    level=logging.WARNING,  # Default to WARNING level
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)
logger = logging.getLogger(__name__)


def version_callback(value: bool) -> None:
    """Handle version flag callback for Typer CLI.

    Args:
        value: Whether the version flag was provided
    """
    if value:
        typer.echo(f"Sample Decoder v{VERSION}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug("Verbose logging enabled")
    else:
        logging.getLogger().setLevel(logging.WARNING)


def read(
        files: list[Path] | None = typer.Argument(
            None, show_default=False,
            help="Audio file to decode (WAV, AIFF, AU, or a raw payload described by a profile)"
        ),
        profile: Path | None = typer.Option(
            None,
            "--profile",
            "-p",
            file_okay=True,
            dir_okay=False,
            help="Stream profile YAML describing raw payload files (ignored for WAV, AIFF and AU)",
        ),
        output: Path | None = typer.Option(
            None,
            "--output",
            "-o",
            file_okay=False,
            dir_okay=True,
            resolve_path=True,
            help="Export decoded samples (.npy) and metadata (.json) to this directory",
        ),
        progress: bool = typer.Option(False, "--progress", help="Show a progress bar while decoding"),
        version: bool = typer.Option(
            None, "--version", "-v",
            callback=version_callback,
            is_eager=True,  # Critical: process before other options
            is_flag=True,
            help="Show version and exit."
        ),
        verbose: bool = typer.Option(
            False, "--verbose",
            help="Enable verbose debug output"
        ),
) -> None:
    """Decode one audio file into a typed frame-by-channel dataset."""

    _configure_logging(verbose)

    console = Console()
    handler = ConsoleOutputHandler(console)

    if not files or len(files) != 1:
        handler.print("must pass one WAV/AIFF/AU/raw file name as a command line argument")
        raise typer.Exit(code=EXIT_USAGE)

    input_path = _sanitize_path(files[0])

    try:
        stream_profile = None
        if is_self_describing(input_path):
            if profile is not None:
                logger.debug(f"Ignoring profile {profile}: {input_path.name} describes its own format")
        else:
            stream_profile = _load_profile(profile)
        bundle = read_all_datasets(
            input_path,
            profile=stream_profile,
            output_handler=handler,
            show_progress=progress,
        )
    except (ConfigError, FileNotFoundError, UnsupportedEncodingError) as e:
        handler.error(str(e))
        raise typer.Exit(code=EXIT_USAGE)

    if bundle.is_empty:
        handler.print(f"COULD NOT READ {input_path}")
        raise typer.Exit(code=EXIT_NO_DATASET)

    if output is not None:
        exporter = DatasetExporter()
        for dataset in bundle:
            array_path, metadata_path = exporter.export(dataset, output, _export_stem(input_path))
            handler.info(f"Wrote {array_path.name} and {metadata_path.name} to {output}")

    handler.print(f"READ {input_path}")


def init_profile(
        path: Path | None = typer.Argument(
            None, dir_okay=False, show_default=False,
            help="Where to write the profile (default: ./sample_decoder.yaml)"
        ),
        force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file"),
) -> None:
    """Write an example stream profile."""

    console = Console()
    target = _sanitize_path(path) if path else ProfileResolver.get_default_path()

    if target.exists() and not force:
        console.print(f"[red]Error:[/red] {target} already exists (use --force to overwrite)")
        raise typer.Exit(code=EXIT_USAGE)

    ProfileGenerator().generate(target)
    console.print(f"Wrote stream profile to {target}")


def validate_profile(
        path: Path = typer.Argument(
            ..., exists=True, file_okay=True, dir_okay=False, readable=True, resolve_path=True,
            help="Stream profile YAML to validate"
        ),
) -> None:
    """Validate a stream profile and print the layout it describes."""

    handler = ConsoleOutputHandler(Console())

    try:
        stream_profile = ProfileLoader.from_yaml(path).load()
    except (ConfigError, UnsupportedEncodingError) as e:
        handler.error(str(e))
        raise typer.Exit(code=EXIT_USAGE)

    handler.fields([
        ("encoding", stream_profile.encoding.value),
        ("bits per sample", stream_profile.bits_per_sample),
        ("channels", stream_profile.channels),
        ("frame rate", stream_profile.frame_rate),
        ("big endian", stream_profile.big_endian),
        ("frames", stream_profile.frames if stream_profile.frames is not None else "from payload size"),
        ("header bytes", stream_profile.header_bytes),
    ])
    handler.print(f"[green]Profile {path} is valid.[/green]")
