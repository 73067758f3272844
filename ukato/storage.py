"""Filesystem-backed access to the notes and templates directories."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator, Literal

MARKDOWN_SUFFIX = ".md"

EntryKind = Literal["notes", "templates"]


class StorageError(RuntimeError):
    """Raised when interacting with the notes directory fails."""


class NoNotesFoundError(StorageError):
    """Raised when a directory holds no files to choose from."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"No files found in {path}")
        self.path = path


@dataclass(frozen=True, slots=True)
class NoteEntry:
    """A single entry of the notes (or templates) directory."""

    name: str
    path: Path
    modified_at: datetime
    is_dir: bool = False


def note_filename(name: str) -> str:
    """Return ``name`` with the ``.md`` extension, appending it only when missing."""

    cleaned = name.strip()
    if not cleaned:
        raise StorageError("A note name is required.")
    if cleaned.endswith(MARKDOWN_SUFFIX):
        return cleaned
    return cleaned + MARKDOWN_SUFFIX


class NoteStore:
    """Enumerate notes in a directory and locate the most recently edited one."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def note_path(self, name: str) -> Path:
        """Full path of the note called ``name`` (``.md`` implied)."""

        return self.path / note_filename(name)

    def list_entries(self, kind: EntryKind = "notes") -> list[NoteEntry]:
        """List directory entries sorted by name.

        ``notes`` keeps markdown files only; ``templates`` additionally keeps
        subdirectories.
        """

        entries = [entry for entry in self._scan() if _matches(entry, kind)]
        return sorted(entries, key=lambda entry: entry.name)

    def most_recent(self) -> NoteEntry:
        """Return the file with the latest modification time.

        Directories are ignored. Ties are resolved by name so the outcome does
        not depend on the directory listing order.
        """

        latest: NoteEntry | None = None
        for entry in self._scan():
            if entry.is_dir:
                continue
            if latest is None or (entry.modified_at, entry.name) > (
                latest.modified_at,
                latest.name,
            ):
                latest = entry
        if latest is None:
            raise NoNotesFoundError(self.path)
        return latest

    def _scan(self) -> Iterator[NoteEntry]:
        try:
            children = list(self.path.iterdir())
        except FileNotFoundError:
            raise StorageError(f"Directory '{self.path}' does not exist.") from None
        except OSError as exc:
            raise StorageError(f"Couldn't access directory '{self.path}': {exc}") from exc

        for child in children:
            try:
                stat = child.stat()
            except OSError:
                # Broken symlinks and entries removed mid-scan are skipped.
                continue
            yield NoteEntry(
                name=child.name,
                path=child,
                modified_at=datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc),
                is_dir=child.is_dir(),
            )


def _matches(entry: NoteEntry, kind: EntryKind) -> bool:
    if kind == "templates" and entry.is_dir:
        return True
    return not entry.is_dir and entry.name.endswith(MARKDOWN_SUFFIX)
