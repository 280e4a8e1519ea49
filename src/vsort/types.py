"""Type aliases needed in the package."""

from enum import Enum
from typing import TypeAlias

Version: TypeAlias = str
Versions: TypeAlias = list[Version]
CompareResult: TypeAlias = int


class InputFormat(str, Enum):
    """Accepted input formats."""

    LINES = "lines"
    JSON = "json"


class OutputFormat(str, Enum):
    """Accepted output formats."""

    LINES = "lines"
    JSON = "json"
