"""High-level note workflows used by the CLI."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Callable

from ..app import AppContext
from ..editor import open_note as default_open_note
from ..paths import ensure_directory
from ..storage import MARKDOWN_SUFFIX, NoteEntry, note_filename
from ..templates import (
    TEMPLATE_SKELETON,
    bootstrap_templates,
    render_new_note,
    template_path,
    templates_dir,
)

WarnFunc = Callable[[str], None]
LaunchFunc = Callable[..., int]


@dataclass(frozen=True, slots=True)
class EditSession:
    """Outcome of an editing session."""

    path: Path
    created: bool
    returncode: int


def create_note(
    ctx: AppContext,
    name: str,
    template: str | None = None,
    *,
    launch_fn: LaunchFunc | None = None,
    warn: WarnFunc | None = None,
    today: date | None = None,
) -> EditSession:
    """Open note ``name``, seeding it from ``template`` when it does not exist yet."""

    launch = launch_fn or default_open_note
    path = ctx.store.note_path(name)

    created = not path.exists()
    content = ""
    if created:
        title = note_filename(name).removesuffix(MARKDOWN_SUFFIX)
        content = render_new_note(
            ctx.notes_dir, title, template, today=today, warn=warn
        )

    returncode = launch(
        path,
        content,
        ctx.config.editor,
        viewer=ctx.config.viewer,
        warn=warn,
    )
    return EditSession(path=path, created=created, returncode=returncode)


def open_entry(
    ctx: AppContext,
    entry: NoteEntry,
    *,
    launch_fn: LaunchFunc | None = None,
    warn: WarnFunc | None = None,
) -> EditSession:
    """Reopen a file picked from the store as is, without any template.

    The entry path is used directly so files without the ``.md`` extension are
    opened rather than shadowed by a new ``<name>.md`` note.
    """

    launch = launch_fn or default_open_note
    returncode = launch(
        entry.path,
        "",
        ctx.config.editor,
        viewer=ctx.config.viewer,
        warn=warn,
    )
    return EditSession(path=entry.path, created=False, returncode=returncode)


def open_recent(
    ctx: AppContext,
    *,
    launch_fn: LaunchFunc | None = None,
    warn: WarnFunc | None = None,
) -> EditSession:
    """Reopen the most recently modified note."""

    return open_entry(ctx, ctx.store.most_recent(), launch_fn=launch_fn, warn=warn)


def edit_template(
    ctx: AppContext,
    name: str,
    *,
    launch_fn: LaunchFunc | None = None,
    warn: WarnFunc | None = None,
) -> EditSession:
    """Open template ``name`` for editing, creating it from a skeleton if needed."""

    launch = launch_fn or default_open_note
    ensure_directory(templates_dir(ctx.notes_dir), parents=True)
    path = template_path(name, ctx.notes_dir)
    created = not path.exists()

    returncode = launch(
        path,
        TEMPLATE_SKELETON,
        ctx.config.editor,
        viewer=ctx.config.viewer,
        warn=warn,
    )
    return EditSession(path=path, created=created, returncode=returncode)


def initialize_notes_dir(notes_dir: Path) -> list[Path]:
    """Create the notes and templates directories and copy the starter templates."""

    ensure_directory(notes_dir)
    ensure_directory(templates_dir(notes_dir), parents=True)
    return bootstrap_templates(notes_dir)
