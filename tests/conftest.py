"""Shared fixtures for burrow tests."""

import pytest

from burrow import preview


@pytest.fixture(autouse=True)
def clear_preview_cache():
    """Reset the module-level preview cache between tests."""
    preview._file_cache.clear()
    yield
    preview._file_cache.clear()


@pytest.fixture
def tree(tmp_path):
    """Create a small directory tree.

    root/
        alpha/   a1.txt a2.txt a3.txt nested/
        beta/    (empty)
        gamma.txt
        notes.md
        zeta.py
    """
    root = tmp_path / "root"
    root.mkdir()

    alpha = root / "alpha"
    alpha.mkdir()
    for name in ("a1.txt", "a2.txt", "a3.txt"):
        (alpha / name).write_text(f"{name}\n")
    (alpha / "nested").mkdir()

    (root / "beta").mkdir()
    (root / "gamma.txt").write_text("gamma\n\tindented\n")
    (root / "notes.md").write_text("# Notes\n")
    (root / "zeta.py").write_text("print('zeta')\n")

    return root


@pytest.fixture
def wide_dir(tmp_path):
    """Directory holding thirty short-named files f00 .. f29."""
    root = tmp_path / "wide"
    root.mkdir()
    for i in range(30):
        (root / f"f{i:02d}").write_text("")
    return root


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    """Point the config layer at a temporary directory."""
    directory = tmp_path / ".config" / "burrow"
    monkeypatch.setattr("burrow.config.get_config_dir", lambda: directory)
    monkeypatch.setattr("burrow.config.get_config_path", lambda: directory / "config.toml")
    return directory
