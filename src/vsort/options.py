"""Sorter configuration and the options that build it."""

import re
from dataclasses import dataclass, replace
from enum import Enum
from typing import Protocol, Self

from .exceptions import InvalidLevelError, InvalidOrderError, InvalidPatternError

UNLIMITED_LEVEL = -1


class Order(str, Enum):
    """Direction of a sort."""

    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class SorterConfig:
    """Resolved configuration of a sorter.

    Attributes:
        order: Sort direction.
        prefix: Compiled prefix pattern anchored at the start, if any.
        suffix: Compiled suffix pattern anchored at the end, if any.
        level: Expected number of components. Non-positive means unlimited.
    """

    order: Order = Order.ASC
    prefix: re.Pattern[str] | None = None
    suffix: re.Pattern[str] | None = None
    level: int = UNLIMITED_LEVEL


class Option(Protocol):
    """A single configuration step applied while building a sorter."""

    def apply(self: Self, config: SorterConfig) -> SorterConfig:
        """Return a new configuration with this option applied.

        Raises:
            SorterConfigError: If the option value is invalid.
        """
        ...


# Inline global flags such as (?i) must stay at the very start of a pattern.
_GLOBAL_FLAGS = re.compile(r"(?:\(\?[aiLmsux]+\))*")


def _compile(pattern: str, before: str, after: str) -> re.Pattern[str]:
    flags = _GLOBAL_FLAGS.match(pattern)
    split = flags.end() if flags else 0
    anchored = f"{pattern[:split]}{before}{pattern[split:]}{after}"
    try:
        return re.compile(anchored)
    except re.error as e:
        raise InvalidPatternError(pattern, str(e)) from e


@dataclass(frozen=True)
class WithOrder:
    """Sort direction, ``Order.ASC`` or ``Order.DESC``."""

    order: Order | str

    def apply(self: Self, config: SorterConfig) -> SorterConfig:
        """Set the sort direction."""
        try:
            order = Order(self.order)
        except ValueError as e:
            raise InvalidOrderError(self.order) from e
        return replace(config, order=order)

    def __str__(self: Self) -> str:
        try:
            return f"order={Order(self.order).value}"
        except ValueError:
            return "order=unknown"


@dataclass(frozen=True)
class WithPrefix:
    """Expected prefix pattern of version strings."""

    pattern: str

    def apply(self: Self, config: SorterConfig) -> SorterConfig:
        """Compile the prefix, anchored at the start of the string."""
        return replace(config, prefix=_compile(self.pattern, "^(?:", ")"))

    def __str__(self: Self) -> str:
        return f"prefix={self.pattern}"


@dataclass(frozen=True)
class WithSuffix:
    """Expected suffix pattern of version strings."""

    pattern: str

    def apply(self: Self, config: SorterConfig) -> SorterConfig:
        """Compile the suffix, anchored at the end of the string."""
        return replace(config, suffix=_compile(self.pattern, "(?:", r")\Z"))

    def __str__(self: Self) -> str:
        return f"suffix={self.pattern}"


@dataclass(frozen=True)
class WithLevel:
    """Expected number of dot-separated components.

    A negative level means any number of components is accepted.
    """

    level: int

    def apply(self: Self, config: SorterConfig) -> SorterConfig:
        """Set the expected level.

        Raises:
            InvalidLevelError: If the level is zero.
        """
        if self.level == 0:
            raise InvalidLevelError(self.level)
        return replace(config, level=self.level)

    def __str__(self: Self) -> str:
        return f"level={self.level}"


DEFAULT_OPTIONS: tuple[Option, ...] = (WithLevel(UNLIMITED_LEVEL),)


def build_config(*options: Option) -> SorterConfig:
    """Build a configuration from defaults followed by the given options.

    Args:
        *options: Options applied in order after the defaults.

    Returns:
        The resolved configuration.

    Raises:
        SorterConfigError: If any option is invalid. Later options are not
            applied.
    """
    config = SorterConfig()
    for option in (*DEFAULT_OPTIONS, *options):
        config = option.apply(config)
    return config
