"""Exceptions raised by vsort."""

from typing import Any


class VsortError(Exception):
    """Base exception for all vsort errors."""


class SorterConfigError(VsortError):
    """Raised when a sorter cannot be built from the given options."""


class InvalidOrderError(SorterConfigError):
    """Raised when an order is neither ascending nor descending."""

    def __init__(self, order: Any) -> None:
        """Initialize the error.

        Args:
            order: The rejected order value.
        """
        self.order = order
        super().__init__(f"Order should be one of 'asc' or 'desc', got {order!r}")


class InvalidLevelError(SorterConfigError):
    """Raised when the expected level is zero."""

    def __init__(self, level: int) -> None:
        """Initialize the error.

        Args:
            level: The rejected level.
        """
        self.level = level
        super().__init__(f"Level should not be zero, got {level}")


class InvalidPatternError(SorterConfigError):
    """Raised when a prefix or suffix pattern does not compile."""

    def __init__(self, pattern: str, reason: str) -> None:
        """Initialize the error.

        Args:
            pattern: The pattern as given by the caller.
            reason: Why compilation failed.
        """
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid pattern {pattern!r}: {reason}")


class ComparisonError(VsortError):
    """Raised when two version strings cannot be compared."""


class PrefixMismatchError(ComparisonError):
    """Raised when a version string does not start with the expected prefix."""

    def __init__(self, v1: str, v2: str, pattern: str) -> None:
        """Initialize the error.

        Args:
            v1: First version string.
            v2: Second version string.
            pattern: The compiled prefix pattern.
        """
        self.v1 = v1
        self.v2 = v2
        self.pattern = pattern
        super().__init__(
            f"Prefix is not matched (v1: {v1!r}, v2: {v2!r}, prefix: {pattern!r})"
        )


class SuffixMismatchError(ComparisonError):
    """Raised when a version string does not end with the expected suffix."""

    def __init__(self, v1: str, v2: str, pattern: str) -> None:
        """Initialize the error.

        Args:
            v1: First version string.
            v2: Second version string.
            pattern: The compiled suffix pattern.
        """
        self.v1 = v1
        self.v2 = v2
        self.pattern = pattern
        super().__init__(
            f"Suffix is not matched (v1: {v1!r}, v2: {v2!r}, suffix: {pattern!r})"
        )


class NotNumericError(ComparisonError):
    """Raised when a version component is not a base-10 integer."""

    def __init__(self, component: str, v1: str, v2: str) -> None:
        """Initialize the error.

        Args:
            component: The component that failed to parse.
            v1: First version string, as given.
            v2: Second version string, as given.
        """
        self.component = component
        self.v1 = v1
        self.v2 = v2
        super().__init__(
            f"Component {component!r} is not numeric (v1: {v1!r}, v2: {v2!r})"
        )


class InvalidVersionError(VsortError):
    """Raised when strict mode meets an invalid version string."""

    def __init__(self, version: str) -> None:
        """Initialize the error.

        Args:
            version: The invalid version string.
        """
        self.version = version
        super().__init__(f"invalid version is contained: {version}")
