"""Comparison, sorting and validation of version strings."""

import logging
import re
from collections.abc import Iterable
from functools import cmp_to_key
from typing import Protocol, Self

from .exceptions import (
    ComparisonError,
    NotNumericError,
    PrefixMismatchError,
    SuffixMismatchError,
)
from .options import Option, Order, SorterConfig, build_config
from .types import CompareResult, Version, Versions

logger = logging.getLogger(__name__)

# Accepted by compare: optional sign, then ASCII digits.
_SIGNED_INT = re.compile(r"[+-]?[0-9]+")
# Accepted by is_valid: ASCII digits only.
_UNSIGNED_INT = re.compile(r"[0-9]+")


class Sorter(Protocol):
    """Compares, sorts and validates version strings."""

    def compare(self: Self, v1: Version, v2: Version) -> CompareResult:
        """Compare two version strings."""
        ...

    def sort(self: Self, versions: Versions) -> None:
        """Sort version strings in place."""
        ...

    def is_valid(self: Self, v: Version) -> bool:
        """Report whether a version string is well formed."""
        ...


def _parse_component(component: str) -> int | None:
    if _SIGNED_INT.fullmatch(component) is None:
        return None
    return int(component)


class VersionSorter:
    """Sorter over dot-separated numeric version strings.

    The configuration is fixed at construction, so one instance can be shared
    freely. ``sort`` mutates only the list it is given.

    Attributes:
        config: The resolved sorter configuration.
    """

    def __init__(self: Self, config: SorterConfig | None = None) -> None:
        """Initialize the sorter.

        Args:
            config: Resolved configuration. Defaults to ascending order with no
                prefix, no suffix and no level constraint.
        """
        self.config = config if config is not None else build_config()

    @property
    def order(self: Self) -> Order:
        """Configured sort direction."""
        return self.config.order

    def _strip(self: Self, v: Version) -> str | None:
        """Remove prefix and suffix from a version string.

        Returns:
            The remaining string, or None if a pattern does not match.
        """
        prefix, suffix = self.config.prefix, self.config.suffix
        if prefix is not None:
            match = prefix.match(v)
            if match is None:
                return None
            v = v[match.end() :]
        if suffix is not None:
            match = suffix.search(v)
            if match is None:
                return None
            v = v[: match.start()]
        return v

    def _split(self: Self, v: str) -> list[str]:
        if self.config.level > 0:
            return v.split(".", self.config.level - 1)
        return v.split(".")

    def compare(self: Self, v1: Version, v2: Version) -> CompareResult:
        """Compare two version strings component by component.

        Only as many components as both strings have are compared. A shorter
        ``v1`` therefore compares equal to any ``v2`` that extends it.

        Args:
            v1: First version string.
            v2: Second version string.

        Returns:
            -1 if ``v1 < v2``, 0 if they are equal and 1 if ``v1 > v2``.

        Raises:
            PrefixMismatchError: If either string lacks the configured prefix.
            SuffixMismatchError: If either string lacks the configured suffix.
            NotNumericError: If a compared component is not an integer.
        """
        s1, s2 = v1, v2
        prefix, suffix = self.config.prefix, self.config.suffix

        if prefix is not None:
            m1, m2 = prefix.match(s1), prefix.match(s2)
            if m1 is None or m2 is None:
                raise PrefixMismatchError(v1, v2, prefix.pattern)
            s1, s2 = s1[m1.end() :], s2[m2.end() :]

        if suffix is not None:
            m1, m2 = suffix.search(s1), suffix.search(s2)
            if m1 is None or m2 is None:
                raise SuffixMismatchError(v1, v2, suffix.pattern)
            s1, s2 = s1[: m1.start()], s2[: m2.start()]

        for c1, c2 in zip(self._split(s1), self._split(s2)):
            n1 = _parse_component(c1)
            if n1 is None:
                raise NotNumericError(c1, v1, v2)
            n2 = _parse_component(c2)
            if n2 is None:
                raise NotNumericError(c2, v1, v2)

            if n1 > n2:
                return 1
            if n1 < n2:
                return -1

        return 0

    def _sort_key_cmp(self: Self, v1: Version, v2: Version) -> CompareResult:
        try:
            result = self.compare(v1, v2)
        except ComparisonError as e:
            logger.debug("Treating %r and %r as equal: %s", v1, v2, e)
            return 0
        return result if self.config.order is Order.ASC else -result

    def sort(self: Self, versions: Versions) -> None:
        """Sort version strings in place in the configured order.

        Pairs that cannot be compared are treated as equal, so a malformed
        entry never aborts the sort but lands somewhere unpredictable. Filter
        with ``is_valid`` first.

        Args:
            versions: List to sort.
        """
        versions.sort(key=cmp_to_key(self._sort_key_cmp))

    def sorted(self: Self, versions: Iterable[Version]) -> Versions:
        """Return a new sorted list, leaving the input untouched.

        Args:
            versions: Version strings to sort.

        Returns:
            Sorted copy of the input.
        """
        items = list(versions)
        self.sort(items)
        return items

    def is_valid(self: Self, v: Version) -> bool:
        """Report whether ``v`` is a well-formed version string.

        Unlike ``compare``, signed components are rejected and the level, when
        set, must match exactly.

        Args:
            v: Version string to check.

        Returns:
            True if ``v`` parses under the current configuration.
        """
        stripped = self._strip(v)
        if stripped is None:
            return False

        components = stripped.split(".")
        if self.config.level > 0 and len(components) != self.config.level:
            return False

        return all(_UNSIGNED_INT.fullmatch(c) is not None for c in components)

    def filter_valid(
        self: Self, versions: Iterable[Version]
    ) -> tuple[Versions, Versions]:
        """Split version strings into valid and invalid ones.

        Args:
            versions: Version strings to check.

        Returns:
            Tuple of (valid, invalid), each in input order.
        """
        valid: Versions = []
        invalid: Versions = []
        for v in versions:
            (valid if self.is_valid(v) else invalid).append(v)
        return valid, invalid

    def __repr__(self: Self) -> str:
        """Return detailed string representation."""
        return f"VersionSorter({self.config!r})"


def new_sorter(*options: Option) -> VersionSorter:
    """Create a sorter from options.

    Args:
        *options: Options applied in order after the defaults.

    Returns:
        Configured sorter.

    Raises:
        SorterConfigError: If an option is invalid.

    Example:
        >>> from vsort import Order, WithOrder, WithPrefix
        >>> sorter = new_sorter(WithPrefix("v"), WithOrder(Order.DESC))
        >>> sorter.sorted(["v0.1.0", "v0.10.0", "v0.2.0"])
        ['v0.10.0', 'v0.2.0', 'v0.1.0']
    """
    return VersionSorter(build_config(*options))
