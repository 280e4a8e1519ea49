"""Configuration file loading for the vsort CLI."""

import logging
import tomllib
from pathlib import Path
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .exceptions import VsortError
from .options import (
    UNLIMITED_LEVEL,
    Option,
    Order,
    WithLevel,
    WithOrder,
    WithPrefix,
    WithSuffix,
)
from .types import InputFormat, OutputFormat

logger = logging.getLogger(__name__)

VSORT_TOML = "vsort.toml"
PYPROJECT_TOML = "pyproject.toml"


class ConfigError(VsortError):
    """Raised when configuration cannot be loaded."""


class VsortSettings(BaseModel):
    """Defaults for the vsort CLI, read from a config file.

    Attributes:
        reverse: Sort in descending order.
        prefix: Expected prefix pattern.
        suffix: Expected suffix pattern, if any.
        level: Expected number of components, -1 for no limit.
        strict: Fail on the first invalid version instead of dropping it.
        input: Input format.
        output: Output format.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    reverse: bool = False
    prefix: str = ""
    suffix: str | None = None
    level: int = Field(default=UNLIMITED_LEVEL)
    strict: bool = False
    input: InputFormat = InputFormat.LINES
    output: OutputFormat = OutputFormat.LINES

    @field_validator("level")
    @classmethod
    def _level_not_zero(cls, value: int) -> int:
        if value == 0:
            raise ValueError("level should not be zero")
        return value

    def to_options(self: Self) -> list[Option]:
        """Build sorter options from these settings.

        Returns:
            Options in the order they should be applied.
        """
        options: list[Option] = [
            WithOrder(Order.DESC if self.reverse else Order.ASC),
            WithPrefix(self.prefix),
            WithLevel(self.level),
        ]
        if self.suffix:
            options.append(WithSuffix(self.suffix))
        return options


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except FileNotFoundError as e:
        raise ConfigError(f"Config file not found: {path}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e


def _extract_section(path: Path, data: dict[str, Any]) -> dict[str, Any] | None:
    if path.name == PYPROJECT_TOML:
        section = data.get("tool", {}).get("vsort")
    else:
        section = data.get("vsort")
    if section is not None and not isinstance(section, dict):
        raise ConfigError(f"vsort configuration in {path} must be a table")
    return section


def find_config_file(start: Path | None = None) -> Path | None:
    """Find a config file in the given directory.

    ``vsort.toml`` wins over ``pyproject.toml``.

    Args:
        start: Directory to look in. Defaults to the current directory.

    Returns:
        Path to the config file, or None if neither exists.
    """
    base = start if start is not None else Path.cwd()
    for name in (VSORT_TOML, PYPROJECT_TOML):
        candidate = base / name
        if candidate.is_file():
            return candidate
    return None


def load_settings(config_path: Path | None = None) -> VsortSettings:
    """Load CLI defaults from a config file.

    An explicit ``config_path`` must exist and contain a vsort section.
    Without one, ``vsort.toml`` or ``pyproject.toml`` in the current directory
    is used when present, and built-in defaults otherwise.

    Args:
        config_path: Explicit path to a config file.

    Returns:
        Validated settings.

    Raises:
        ConfigError: If the file cannot be read or its contents are invalid.
    """
    path = config_path if config_path is not None else find_config_file()
    if path is None:
        logger.debug("No config file found, using defaults")
        return VsortSettings()

    section = _extract_section(path, _read_toml(path))
    if section is None:
        if config_path is not None:
            raise ConfigError(f"No vsort configuration found in {path}")
        logger.debug("No vsort section in %s, using defaults", path)
        return VsortSettings()

    logger.debug("Loading settings from %s", path)
    try:
        return VsortSettings.model_validate(section)
    except ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}"
            for err in e.errors()
        )
        raise ConfigError(f"Invalid configuration in {path}: {details}") from e
