"""Init command for ukato CLI."""

from __future__ import annotations

from pathlib import Path

import click

from ..config import (
    DEFAULT_CONFIG_PATH,
    ConfigError,
    UkatoConfig,
    default_config,
    load_config_or_default,
    save_config,
)
from ..paths import DirectoryError, expand_path
from ..services.notes import initialize_notes_dir
from ._common import UkatoCliError, warn

EDITOR_CHOICES = ("vim", "nano", "emacs", "micro")
NO_VIEWER = ("", "-")


@click.command(name="init")
@click.option("-d", "--directory", default=None, help="Notes directory.")
@click.option(
    "-e",
    "--editor",
    default=None,
    help="Editor command used to open notes.",
)
@click.option(
    "-v",
    "--viewer",
    default=None,
    help="Markdown viewer started next to the editor ('-' to disable).",
)
@click.pass_context
def init(
    ctx: click.Context,
    directory: str | None,
    editor: str | None,
    viewer: str | None,
) -> None:
    """Set up the notes directory, editor and viewer."""

    selected_path: Path | None = ctx.obj.get("config_path")
    effective_path = selected_path or DEFAULT_CONFIG_PATH

    try:
        current = load_config_or_default(effective_path)
    except ConfigError as exc:
        warn(f"{exc}; starting from the default settings.")
        current = default_config()

    click.echo("Welcome to the setup wizard")

    if directory is None:
        directory = click.prompt("Notes directory", default=str(current.directory))
    if editor is None:
        default_editor = (
            current.editor if current.editor in EDITOR_CHOICES else EDITOR_CHOICES[0]
        )
        editor = click.prompt(
            "Select your preferred editor",
            type=click.Choice(EDITOR_CHOICES),
            default=default_editor,
            show_choices=True,
        )
    if viewer is None:
        viewer = click.prompt(
            "Markdown viewer ('-' for none)",
            default=current.viewer or "",
            show_default=bool(current.viewer),
        )

    notes_dir = expand_path(directory.strip())
    try:
        created_templates = initialize_notes_dir(notes_dir)
    except DirectoryError as exc:
        raise UkatoCliError(str(exc)) from exc

    config = UkatoConfig(
        directory=notes_dir,
        editor=editor.strip(),
        viewer=None if viewer.strip() in NO_VIEWER else viewer.strip(),
    )
    written = save_config(config, effective_path)

    for template in created_templates:
        click.echo(f"Added template {template.name}")
    click.echo(f"Saved configuration to {written}")


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(init)
