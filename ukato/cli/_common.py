"""Shared helpers for ukato CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Sequence

import click

from ..app import AppContext, bootstrap
from ..config import ConfigError, MissingConfigError
from ..paths import DirectoryError
from ..services.notes import EditSession
from ..storage import NoteEntry

CONTEXT_SETTINGS: dict[str, Any] = {"help_option_names": ["-h", "--help"]}


class UkatoCliError(click.ClickException):
    """Shared Click exception wrapper for CLI failures."""


def get_app(ctx: click.Context) -> AppContext:
    """Return a cached AppContext for the current CLI invocation."""

    app: AppContext | None = ctx.obj.get("app")
    if app is not None:
        return app

    config_path_opt: Path | None = ctx.obj.get("config_path")

    try:
        app = bootstrap(config_path_opt)
    except MissingConfigError as exc:
        raise UkatoCliError(
            "Configuration not found. Run 'ukato init' once to set up ukato."
        ) from exc
    except (ConfigError, DirectoryError) as exc:
        raise UkatoCliError(str(exc)) from exc

    ctx.obj["app"] = app
    return app


def warn(message: str) -> None:
    """Print a warning for the user on stderr."""

    click.echo(f"Warning: {message}", err=True)


def select_entry(entries: Sequence[NoteEntry], prompt: str) -> NoteEntry:
    """Show a numbered list of ``entries`` and let the user pick one."""

    click.echo(prompt)
    for index, entry in enumerate(entries, start=1):
        suffix = "/" if entry.is_dir else ""
        click.echo(f"{index:>4}  {entry.name}{suffix}")

    choice = click.prompt(
        "Select",
        type=click.IntRange(1, len(entries)),
        default=1,
        show_default=True,
    )
    return entries[choice - 1]


def report_session(session: EditSession) -> None:
    verb = "Created" if session.created else "Opened"
    click.echo(f"{verb} {session.path}")
