"""List commands for ukato CLI."""

from __future__ import annotations

import click

from ..app import AppContext
from ..editor import EditorError
from ..paths import DirectoryError
from ..services.notes import edit_template, open_entry
from ..storage import (
    EntryKind,
    NoNotesFoundError,
    NoteEntry,
    NoteStore,
    StorageError,
)
from ..templates import templates_dir
from ._common import UkatoCliError, get_app, report_session, select_entry, warn

print_only_option = click.option(
    "-p",
    "--print",
    "print_only",
    is_flag=True,
    help="Only print the entries, do not prompt for one to open.",
)


@click.command(name="list-notes")
@print_only_option
@click.pass_context
def list_notes(ctx: click.Context, print_only: bool) -> None:
    """List notes and open the selected one."""

    app = get_app(ctx)
    entries = _entries(app, kind="notes")

    if print_only:
        _print_entries(entries)
        return

    entry = select_entry(entries, "Your notes:")
    try:
        session = open_entry(app, entry, warn=warn)
    except (EditorError, StorageError) as exc:
        raise UkatoCliError(str(exc)) from exc

    report_session(session)


@click.command(name="list-templates")
@print_only_option
@click.pass_context
def list_templates(ctx: click.Context, print_only: bool) -> None:
    """List templates and open the selected one for editing."""

    app = get_app(ctx)
    entries = _entries(app, kind="templates")

    if print_only:
        _print_entries(entries)
        return

    entry = select_entry(entries, "Your templates:")
    if entry.is_dir:
        raise UkatoCliError(f"'{entry.name}' is a directory, not a template.")

    try:
        session = edit_template(app, entry.name, warn=warn)
    except (DirectoryError, EditorError, StorageError) as exc:
        raise UkatoCliError(str(exc)) from exc

    report_session(session)


def _entries(app: AppContext, *, kind: EntryKind) -> list[NoteEntry]:
    store = app.store
    if kind == "templates":
        store = NoteStore(templates_dir(app.notes_dir))

    try:
        entries = store.list_entries(kind)
        if not entries:
            raise NoNotesFoundError(store.path)
    except StorageError as exc:
        raise UkatoCliError(str(exc)) from exc
    return entries


def _print_entries(entries: list[NoteEntry]) -> None:
    for entry in entries:
        suffix = "/" if entry.is_dir else ""
        click.echo(f"{entry.name}{suffix}")


def register(cli: click.Group) -> None:
    """Register the commands with the root CLI group."""

    cli.add_command(list_notes)
    cli.add_command(list_notes, name="list")
    cli.add_command(list_templates)
