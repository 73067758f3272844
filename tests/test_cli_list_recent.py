"""Tests for the list and recent CLI subcommands."""

from __future__ import annotations

import os
from pathlib import Path

from click.testing import CliRunner
from ukato import cli
from ukato.services import notes as notes_module


def _write_config(base_dir: Path) -> tuple[Path, Path]:
    notes_dir = base_dir / "notes"
    (notes_dir / "templates").mkdir(parents=True)
    config_path = base_dir / "config.toml"
    config_path.write_text(
        f'[ukato]\ndirectory = "{notes_dir}"\neditor = "vim"\nviewer = "glow"\n',
        encoding="utf-8",
    )
    return config_path, notes_dir


def _touch(path: Path, mtime: float, content: str = "content") -> Path:
    path.write_text(content, encoding="utf-8")
    os.utime(path, (mtime, mtime))
    return path


def _fake_launcher(monkeypatch) -> list[tuple[Path, str, str, str | None]]:
    launches: list[tuple[Path, str, str, str | None]] = []

    def fake_open_note(path, content, editor, *, viewer=None, warn=None):
        launches.append((path, content, editor, viewer))
        return 0

    monkeypatch.setattr(notes_module, "default_open_note", fake_open_note)
    return launches


def test_list_opens_selected_note(tmp_path: Path, monkeypatch) -> None:
    config_path, notes_dir = _write_config(tmp_path)
    _touch(notes_dir / "b.md", 100)
    _touch(notes_dir / "a.md", 200)
    _touch(notes_dir / "c.txt", 300)
    launches = _fake_launcher(monkeypatch)

    runner = CliRunner()
    result = runner.invoke(
        cli.cli, ["--config", str(config_path), "list"], input="2\n"
    )

    assert result.exit_code == 0, result.output
    assert "Your notes:" in result.output
    assert "c.txt" not in result.output
    assert launches == [(notes_dir / "b.md", "", "vim", "glow")]
    assert (notes_dir / "b.md").read_text(encoding="utf-8") == "content"


def test_list_notes_print_only(tmp_path: Path, monkeypatch) -> None:
    config_path, notes_dir = _write_config(tmp_path)
    _touch(notes_dir / "b.md", 100)
    _touch(notes_dir / "a.md", 200)
    launches = _fake_launcher(monkeypatch)

    runner = CliRunner()
    result = runner.invoke(
        cli.cli, ["--config", str(config_path), "list-notes", "--print"]
    )

    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == ["a.md", "b.md"]
    assert launches == []


def test_list_rejects_out_of_range_choice(tmp_path: Path, monkeypatch) -> None:
    config_path, notes_dir = _write_config(tmp_path)
    _touch(notes_dir / "a.md", 100)
    launches = _fake_launcher(monkeypatch)

    runner = CliRunner()
    result = runner.invoke(
        cli.cli, ["--config", str(config_path), "list-notes"], input="5\n1\n"
    )

    assert result.exit_code == 0, result.output
    assert launches[0][0] == notes_dir / "a.md"


def test_list_empty_directory_aborts(tmp_path: Path, monkeypatch) -> None:
    config_path, _ = _write_config(tmp_path)
    launches = _fake_launcher(monkeypatch)

    runner = CliRunner()
    result = runner.invoke(cli.cli, ["--config", str(config_path), "list"])

    assert result.exit_code == 1
    assert "No files found" in result.output
    assert launches == []


def test_list_templates_opens_template(tmp_path: Path, monkeypatch) -> None:
    config_path, notes_dir = _write_config(tmp_path)
    templates_dir = notes_dir / "templates"
    _touch(templates_dir / "basic.md", 100, "_TITLE_")
    (templates_dir / "work").mkdir()
    launches = _fake_launcher(monkeypatch)

    runner = CliRunner()
    result = runner.invoke(
        cli.cli, ["--config", str(config_path), "list-templates"], input="1\n"
    )

    assert result.exit_code == 0, result.output
    assert "work/" in result.output
    [(path, _, editor, _)] = launches
    assert path == templates_dir / "basic.md"
    assert editor == "vim"


def test_list_templates_rejects_directories(tmp_path: Path, monkeypatch) -> None:
    config_path, notes_dir = _write_config(tmp_path)
    _touch(notes_dir / "templates" / "basic.md", 100)
    (notes_dir / "templates" / "work").mkdir()
    launches = _fake_launcher(monkeypatch)

    runner = CliRunner()
    result = runner.invoke(
        cli.cli, ["--config", str(config_path), "list-templates"], input="2\n"
    )

    assert result.exit_code == 1
    assert "is a directory" in result.output
    assert launches == []


def test_recent_opens_latest_note(tmp_path: Path, monkeypatch) -> None:
    config_path, notes_dir = _write_config(tmp_path)
    _touch(notes_dir / "old.md", 1_000)
    _touch(notes_dir / "newest.md", 3_000)
    _touch(notes_dir / "middle.md", 2_000)
    os.utime(notes_dir / "templates", (9_000, 9_000))
    launches = _fake_launcher(monkeypatch)

    runner = CliRunner()
    result = runner.invoke(cli.cli, ["--config", str(config_path), "recent"])

    assert result.exit_code == 0, result.output
    assert launches == [(notes_dir / "newest.md", "", "vim", "glow")]
    assert f"Opened {notes_dir / 'newest.md'}" in result.output


def test_recent_empty_directory_aborts(tmp_path: Path, monkeypatch) -> None:
    config_path, _ = _write_config(tmp_path)
    launches = _fake_launcher(monkeypatch)

    runner = CliRunner()
    result = runner.invoke(cli.cli, ["--config", str(config_path), "recent"])

    assert result.exit_code == 1
    assert "No files found" in result.output
    assert launches == []


def test_missing_notes_directory_is_created(tmp_path: Path, monkeypatch) -> None:
    notes_dir = tmp_path / "fresh"
    config_path = tmp_path / "config.toml"
    config_path.write_text(f'[ukato]\ndirectory = "{notes_dir}"\n', encoding="utf-8")
    _fake_launcher(monkeypatch)

    runner = CliRunner()
    result = runner.invoke(cli.cli, ["--config", str(config_path), "recent"])

    assert notes_dir.is_dir()
    assert result.exit_code == 1
    assert "No files found" in result.output


def test_recent_opens_latest_file_as_is(tmp_path: Path, monkeypatch) -> None:
    config_path, notes_dir = _write_config(tmp_path)
    _touch(notes_dir / "a.md", 1_000)
    _touch(notes_dir / "scratch.txt", 2_000, "scratch")
    launches = _fake_launcher(monkeypatch)

    runner = CliRunner()
    result = runner.invoke(cli.cli, ["--config", str(config_path), "recent"])

    assert result.exit_code == 0, result.output
    assert launches == [(notes_dir / "scratch.txt", "", "vim", "glow")]
    assert not (notes_dir / "scratch.txt.md").exists()
    assert (notes_dir / "scratch.txt").read_text(encoding="utf-8") == "scratch"
