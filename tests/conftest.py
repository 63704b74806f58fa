"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_config_home(
    tmp_path_factory: pytest.TempPathFactory,
    monkeypatch: pytest.MonkeyPatch,
) -> Path:
    """Point XDG_CONFIG_HOME at an empty directory so user config never leaks in."""
    config_home = tmp_path_factory.mktemp("xdg-config")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture
def sample_dir(tmp_path: Path) -> Path:
    """Directory with two files and one subdirectory.

    Layout:
        a.txt        (5 bytes)
        b.log        (3 bytes)
        sub/
            a.txt    (2 bytes)
            deep/
                c.md (1 byte)
    """
    root = tmp_path / "root"
    root.mkdir()
    (root / "a.txt").write_text("hello")
    (root / "b.log").write_text("log")
    sub = root / "sub"
    sub.mkdir()
    (sub / "a.txt").write_text("hi")
    deep = sub / "deep"
    deep.mkdir()
    (deep / "c.md").write_text("#")
    return root
