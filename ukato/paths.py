"""Helpers for resolving and preparing the notes directory."""

from __future__ import annotations

import os
from pathlib import Path

HOME_MARKER = "~"


class DirectoryError(RuntimeError):
    """Raised when a required directory cannot be used or created."""


def expand_path(path: str | Path) -> Path:
    """Replace a leading ``~`` with the user's home directory.

    Only the bare marker or the marker followed by a separator is expanded;
    any other path is returned unchanged.
    """

    raw = str(path)
    if raw == HOME_MARKER:
        return Path.home()
    if raw.startswith((HOME_MARKER + "/", HOME_MARKER + os.sep)):
        return Path.home() / raw[len(HOME_MARKER) + 1 :]
    return Path(raw)


def ensure_directory(path: Path, *, parents: bool = False) -> Path:
    """Create ``path`` if it does not exist and check that it is usable."""

    if path.exists():
        if not path.is_dir():
            raise DirectoryError(f"'{path}' exists but is not a directory.")
    else:
        try:
            path.mkdir(parents=parents)
        except FileExistsError:
            pass
        except OSError as exc:
            raise DirectoryError(f"Error creating directory '{path}': {exc}") from exc

    if not os.access(path, os.R_OK | os.X_OK):
        raise DirectoryError(f"Directory '{path}' is not readable.")
    return path
