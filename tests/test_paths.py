"""Tests for notes directory resolution."""

from __future__ import annotations

from pathlib import Path

import pytest
from ukato.paths import DirectoryError, ensure_directory, expand_path


@pytest.fixture()
def fake_home(tmp_path: Path, monkeypatch) -> Path:
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: home))
    return home


def test_expand_path_replaces_leading_marker(fake_home: Path) -> None:
    assert expand_path("~/notes") == fake_home / "notes"
    assert expand_path("~") == fake_home


def test_expand_path_leaves_other_paths_alone(fake_home: Path) -> None:
    assert expand_path("/srv/notes") == Path("/srv/notes")
    assert expand_path("notes/~draft") == Path("notes/~draft")
    assert expand_path("~someone/notes") == Path("~someone/notes")


def test_ensure_directory_creates_missing_directory(tmp_path: Path) -> None:
    target = tmp_path / "notes"

    assert ensure_directory(target) == target
    assert target.is_dir()

    # A second call is a no-op.
    ensure_directory(target)


def test_ensure_directory_is_not_recursive_by_default(tmp_path: Path) -> None:
    with pytest.raises(DirectoryError):
        ensure_directory(tmp_path / "missing" / "notes")


def test_ensure_directory_with_parents(tmp_path: Path) -> None:
    target = tmp_path / "notes" / "templates"
    ensure_directory(target, parents=True)
    assert target.is_dir()


def test_ensure_directory_rejects_files(tmp_path: Path) -> None:
    target = tmp_path / "notes"
    target.write_text("not a directory", encoding="utf-8")

    with pytest.raises(DirectoryError) as excinfo:
        ensure_directory(target)
    assert "not a directory" in str(excinfo.value)
