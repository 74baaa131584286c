"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_config_home(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at an empty directory so user config never leaks in."""
    config_home = tmp_path_factory.mktemp("xdg-config")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Create a small directory tree for listing and search tests.

    Layout::

        root/
            foo.rs          (10 bytes)
            notes.txt       (5 bytes)
            src/
                BAR.RS      (20 bytes)
                deep/
                    baz.txt (7 bytes)
    """
    root = tmp_path / "root"
    (root / "src" / "deep").mkdir(parents=True)
    (root / "foo.rs").write_bytes(b"x" * 10)
    (root / "notes.txt").write_bytes(b"y" * 5)
    (root / "src" / "BAR.RS").write_bytes(b"z" * 20)
    (root / "src" / "deep" / "baz.txt").write_bytes(b"w" * 7)
    return root


class FakeClock:
    """Manually advanced monotonic clock for debounce tests."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    """Fake monotonic clock starting at 1000.0 seconds."""
    return FakeClock()
