"""Recent command for ukato CLI."""

from __future__ import annotations

import click

from ..editor import EditorError
from ..services.notes import open_recent
from ..storage import StorageError
from ._common import UkatoCliError, get_app, report_session, warn


@click.command(name="recent")
@click.pass_context
def recent(ctx: click.Context) -> None:
    """Open the most recently modified note."""

    app = get_app(ctx)

    try:
        session = open_recent(app, warn=warn)
    except (EditorError, StorageError) as exc:
        raise UkatoCliError(str(exc)) from exc

    report_session(session)


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(recent)
