"""ukato CLI package."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import click

from .. import __version__
from . import create, init_cmd, ls, recent, template
from ._common import CONTEXT_SETTINGS, UkatoCliError

__all__ = ["cli", "main", "UkatoCliError"]


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__, prog_name="ukato")
@click.option(
    "-c",
    "--config",
    "config_path_opt",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to configuration TOML file.",
)
@click.pass_context
def cli(ctx: click.Context, config_path_opt: Path | None) -> None:
    """Simple CLI to create and manage notes using your favorite text editor."""

    ctx.ensure_object(dict)
    invoked = ctx.invoked_subcommand

    if invoked is None:
        click.echo(ctx.command.get_help(ctx))
        ctx.exit(0)

    ctx.obj["config_path"] = config_path_opt


for register_command in (
    init_cmd.register,
    create.register,
    template.register,
    ls.register,
    recent.register,
):
    register_command(cli)


def main(argv: Sequence[str] | None = None) -> int:
    args = list(argv) if argv is not None else None
    try:
        return cli.main(args=args, prog_name="ukato", standalone_mode=False) or 0
    except click.exceptions.Abort:
        click.echo("Aborted!", err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except SystemExit as exc:
        return int(exc.code or 0)
