"""Launch the external editor (and optional markdown viewer) on a note."""

from __future__ import annotations

import os
import shlex
import subprocess
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterator

from .config import DEFAULT_EDITOR

WarnFunc = Callable[[str], None]

# Seconds granted to the viewer to exit after being asked to terminate.
VIEWER_SHUTDOWN_TIMEOUT = 2.0


class EditorError(RuntimeError):
    """Raised when an editing session cannot be started."""


def resolve_editor(configured: str | None) -> str:
    """Return the editor command: configured value, ``$VISUAL``, ``$EDITOR``, ``vim``."""

    for candidate in (configured, os.environ.get("VISUAL"), os.environ.get("EDITOR")):
        if candidate and candidate.strip():
            return candidate.strip()
    return DEFAULT_EDITOR


def open_note(
    path: Path,
    content_if_new: str,
    editor: str | None,
    *,
    viewer: str | None = None,
    warn: WarnFunc | None = None,
) -> int:
    """Open ``path`` in ``editor`` while ``viewer`` previews it.

    A missing file is first created with ``content_if_new``; an existing file
    is never rewritten. Blocks until the editor exits and returns its exit
    status. The viewer is terminated on every exit path.
    """

    if path.exists():
        _warn(warn, f"{path} already exists; opening the existing file.")
    else:
        try:
            path.write_text(content_if_new, encoding="utf-8")
        except OSError as exc:
            raise EditorError(f"Failed to write {path}: {exc}") from exc

    with viewer_running(viewer, path, warn=warn):
        returncode = run_editor(editor, path)

    if returncode != 0:
        _warn(warn, f"Editor exited with status {returncode}.")
    return returncode


def run_editor(editor: str | None, path: Path) -> int:
    """Run the editor on ``path`` in the foreground and return its exit status."""

    command = _split_command(resolve_editor(editor))
    try:
        process = subprocess.run([*command, str(path)], check=False)
    except OSError as exc:
        raise EditorError(f"Failed to launch editor '{command[0]}': {exc}") from exc
    return process.returncode


@contextmanager
def viewer_running(
    viewer: str | None, path: Path, *, warn: WarnFunc | None = None
) -> Iterator[subprocess.Popen[bytes] | None]:
    """Keep ``viewer`` running on ``path`` for the duration of the block.

    Yields ``None`` when no viewer is configured or it could not be started.
    """

    process = _start_viewer(viewer, path, warn=warn) if viewer else None
    try:
        yield process
    finally:
        if process is not None:
            _stop_viewer(process)


def _start_viewer(
    viewer: str, path: Path, *, warn: WarnFunc | None
) -> subprocess.Popen[bytes] | None:
    try:
        command = _split_command(viewer)
        return subprocess.Popen(
            [*command, str(path)],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except (OSError, EditorError) as exc:
        _warn(warn, f"Could not start viewer '{viewer}': {exc}")
        return None


def _stop_viewer(process: subprocess.Popen[bytes]) -> None:
    try:
        process.terminate()
        process.wait(timeout=VIEWER_SHUTDOWN_TIMEOUT)
    except subprocess.TimeoutExpired:
        try:
            process.kill()
            process.wait()
        except OSError:
            pass
    except OSError:
        # The viewer may already be gone.
        pass


def _split_command(command: str) -> list[str]:
    try:
        parts = shlex.split(command)
    except ValueError as exc:
        raise EditorError(f"Invalid command '{command}': {exc}") from exc
    if not parts:
        raise EditorError("Empty command.")
    return parts


def _warn(warn: WarnFunc | None, message: str) -> None:
    if warn is not None:
        warn(message)
