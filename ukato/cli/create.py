"""Create command for ukato CLI."""

from __future__ import annotations

import click

from ..editor import EditorError
from ..services.notes import create_note
from ..storage import StorageError
from ._common import UkatoCliError, get_app, report_session, warn


@click.command(name="create")
@click.argument("name")
@click.option(
    "-t",
    "--template",
    default=None,
    help="Template used to seed a new note (defaults to 'basic').",
)
@click.pass_context
def create(ctx: click.Context, name: str, template: str | None) -> None:
    """Create the note NAME, or open it when it already exists."""

    app = get_app(ctx)

    try:
        session = create_note(app, name, template, warn=warn)
    except (EditorError, StorageError) as exc:
        raise UkatoCliError(str(exc)) from exc

    report_session(session)


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(create)
