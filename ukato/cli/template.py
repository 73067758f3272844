"""Template command for ukato CLI."""

from __future__ import annotations

import click

from ..editor import EditorError
from ..paths import DirectoryError
from ..services.notes import edit_template
from ..storage import StorageError
from ._common import UkatoCliError, get_app, report_session, warn


@click.command(name="template")
@click.argument("name")
@click.pass_context
def template(ctx: click.Context, name: str) -> None:
    """Create or edit the template NAME."""

    app = get_app(ctx)

    try:
        session = edit_template(app, name, warn=warn)
    except (DirectoryError, EditorError, StorageError) as exc:
        raise UkatoCliError(str(exc)) from exc

    report_session(session)


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(template)
