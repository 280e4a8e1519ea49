"""Command-line interface for vsort."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from .._version import __version__
from ..config import ConfigError, load_settings
from ..exceptions import InvalidVersionError, SorterConfigError
from ..sorter import new_sorter
from ..types import InputFormat, OutputFormat
from ._helpers import (
    InputReadError,
    configure_logging,
    print_error,
    read_versions,
    write_versions,
)

logger = logging.getLogger(__name__)

app = typer.Typer(help="Sort version strings numerically", add_completion=False)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"vsort version {__version__}")
        raise typer.Exit()


@app.command()
def main(  # noqa: PLR0913
    files: Annotated[
        list[Path] | None,
        typer.Argument(help="Input files. Reads stdin when omitted."),
    ] = None,
    input_format: Annotated[
        InputFormat | None,
        typer.Option(
            "--input",
            "-i",
            help='Input format, "lines" or "json" (default: "lines").',
            case_sensitive=False,
        ),
    ] = None,
    output_format: Annotated[
        OutputFormat | None,
        typer.Option(
            "--output",
            "-o",
            help='Output format, "lines" or "json" (default: "lines").',
            case_sensitive=False,
        ),
    ] = None,
    reverse: Annotated[
        bool | None,
        typer.Option("--reverse/--no-reverse", "-r", help="Sort in reverse order."),
    ] = None,
    prefix: Annotated[
        str | None,
        typer.Option("--prefix", "-p", help="Expected prefix of version string."),
    ] = None,
    suffix: Annotated[
        str | None,
        typer.Option(
            "--suffix", "-s", help="Expected suffix pattern of version string."
        ),
    ] = None,
    level: Annotated[
        int | None,
        typer.Option("--level", "-L", help="Expected version level (default: -1)."),
    ] = None,
    strict: Annotated[
        bool | None,
        typer.Option(
            "--strict/--no-strict",
            help="Fail when an invalid version is contained.",
        ),
    ] = None,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to config file (vsort.toml or pyproject.toml)",
        ),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", help="Log debug output to stderr.")
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            help="Print the version and exit.",
            callback=_version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """Sort version strings read from FILES or stdin.

    Examples:
        # Sort lines from stdin
        git tag | vsort -p v

        # Descending, three components, JSON output
        vsort -r -L 3 -o json versions.txt
    """
    configure_logging(verbose)
    try:
        settings = load_settings(config)
        overrides = {
            "prefix": prefix,
            "suffix": suffix,
            "level": level,
            "input": input_format,
            "output": output_format,
            "reverse": reverse,
            "strict": strict,
        }
        settings = settings.model_copy(
            update={k: v for k, v in overrides.items() if v is not None}
        )

        sorter = new_sorter(*settings.to_options())
        logger.debug("Using %r", sorter)

        versions = read_versions(files or [], settings.input)
        valid, invalid = sorter.filter_valid(versions)
        if invalid:
            if settings.strict:
                raise InvalidVersionError(invalid[0])
            for v in invalid:
                logger.debug("Dropping invalid version %r", v)

        sorter.sort(valid)
        write_versions(valid, settings.output)

    except (
        ConfigError,
        SorterConfigError,
        InputReadError,
        InvalidVersionError,
    ) as e:
        print_error(str(e))
        raise typer.Exit(1) from e


if __name__ == "__main__":
    app()
