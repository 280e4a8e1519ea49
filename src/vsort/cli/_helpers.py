"""Input, output and console helpers for the CLI."""

import json
import logging
from collections.abc import Callable, Iterable
from pathlib import Path

import typer
from pydantic import TypeAdapter, ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from ..exceptions import VsortError
from ..types import InputFormat, OutputFormat, Versions

err_console = Console(stderr=True)

_versions_adapter = TypeAdapter(list[str])

STDIN_NAME = "<stdin>"


class InputReadError(VsortError):
    """Raised when an input source cannot be read or decoded."""

    def __init__(self, name: str, reason: str) -> None:
        """Initialize the error.

        Args:
            name: File path or ``<stdin>``.
            reason: What went wrong.
        """
        self.name = name
        self.reason = reason
        super().__init__(f"cannot read from {name}: {reason}")


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    err_console.print(f"[red]✗ Error:[/red] {escape(message)}")


def configure_logging(verbose: bool) -> None:
    """Send vsort debug logs to stderr through rich when verbose."""
    if not verbose:
        return
    logger = logging.getLogger("vsort")
    logger.setLevel(logging.DEBUG)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=err_console, show_path=False))


def parse_lines(text: str) -> Versions:
    """Split text into lines.

    A trailing newline does not produce an empty last line, and a carriage
    return before each newline is dropped.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def parse_json(text: str) -> Versions:
    """Decode a JSON array of strings.

    Raises:
        ValidationError: If the text is not valid JSON or not a string array.
    """
    return _versions_adapter.validate_json(text)


_PARSERS: dict[InputFormat, Callable[[str], Versions]] = {
    InputFormat.LINES: parse_lines,
    InputFormat.JSON: parse_json,
}


def _describe(e: ValidationError) -> str:
    return "; ".join(err["msg"] for err in e.errors())


def read_versions(paths: Iterable[Path], input_format: InputFormat) -> Versions:
    """Read versions from files, or from stdin when no paths are given.

    Sources are concatenated in the order given.

    Args:
        paths: Input files.
        input_format: How each source is decoded.

    Returns:
        All versions in input order.

    Raises:
        InputReadError: If a source cannot be read or decoded.
    """
    parse = _PARSERS[input_format]
    sources = list(paths)
    if not sources:
        try:
            text = typer.get_text_stream("stdin").read()
        except (OSError, UnicodeDecodeError) as e:
            raise InputReadError(STDIN_NAME, str(e)) from e
        try:
            return parse(text)
        except ValidationError as e:
            raise InputReadError(STDIN_NAME, _describe(e)) from e

    versions: Versions = []
    for path in sources:
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise InputReadError(str(path), "file not found") from e
        except (OSError, UnicodeDecodeError) as e:
            raise InputReadError(str(path), str(e)) from e
        try:
            versions.extend(parse(text))
        except ValidationError as e:
            raise InputReadError(str(path), _describe(e)) from e
    return versions


def write_versions(versions: Versions, output_format: OutputFormat) -> None:
    """Write versions to stdout.

    Lines output ends every version with a newline. JSON output is a compact
    array without a trailing newline.
    """
    if output_format is OutputFormat.JSON:
        typer.echo(
            json.dumps(versions, ensure_ascii=False, separators=(",", ":")), nl=False
        )
        return
    for v in versions:
        typer.echo(v)
