"""Shared fixtures for vsort tests."""

from pathlib import Path

import pytest
from pytest import MonkeyPatch

from vsort import Order, VersionSorter, WithLevel, WithOrder, WithPrefix, new_sorter


@pytest.fixture
def sorter() -> VersionSorter:
    """Sorter with default configuration."""
    return new_sorter()


@pytest.fixture
def desc_sorter() -> VersionSorter:
    """Sorter in descending order."""
    return new_sorter(WithOrder(Order.DESC))


@pytest.fixture
def v_sorter() -> VersionSorter:
    """Sorter expecting a "v" prefix."""
    return new_sorter(WithPrefix("v"))


@pytest.fixture
def level3_sorter() -> VersionSorter:
    """Sorter expecting exactly three components."""
    return new_sorter(WithLevel(3))


@pytest.fixture
def unsorted_versions() -> list[str]:
    """Versions whose lexicographic and numeric orders differ."""
    return ["0.2.0", "0.0.1", "0.10.0", "0.0.2"]


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: MonkeyPatch) -> Path:
    """Empty working directory with no config files."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
