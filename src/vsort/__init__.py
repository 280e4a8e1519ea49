"""vsort - sort version strings numerically.

A package and command-line tool for comparing, validating and sorting
dot-separated numeric version strings with optional prefix and suffix
patterns.
"""

from ._version import __version__
from .exceptions import (
    ComparisonError,
    InvalidLevelError,
    InvalidOrderError,
    InvalidPatternError,
    InvalidVersionError,
    NotNumericError,
    PrefixMismatchError,
    SorterConfigError,
    SuffixMismatchError,
    VsortError,
)
from .options import (
    Option,
    Order,
    SorterConfig,
    WithLevel,
    WithOrder,
    WithPrefix,
    WithSuffix,
)
from .sorter import Sorter, VersionSorter, new_sorter
from .types import CompareResult, Version, Versions

__all__ = [
    "CompareResult",
    "ComparisonError",
    "InvalidLevelError",
    "InvalidOrderError",
    "InvalidPatternError",
    "InvalidVersionError",
    "NotNumericError",
    "Option",
    "Order",
    "PrefixMismatchError",
    "Sorter",
    "SorterConfig",
    "SorterConfigError",
    "SuffixMismatchError",
    "Version",
    "VersionSorter",
    "Versions",
    "VsortError",
    "WithLevel",
    "WithOrder",
    "WithPrefix",
    "WithSuffix",
    "__version__",
    "new_sorter",
]
