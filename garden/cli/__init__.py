"""Garden CLI package."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import click

from ..logging_setup import setup_logging
from . import config_cmd, spark, write
from ._common import CONTEXT_SETTINGS, GardenCliError

__all__ = ["cli", "main", "GardenCliError"]


@click.group(context_settings=CONTEXT_SETTINGS)
@click.option(
    "-c",
    "--config",
    "config_path_opt",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to configuration TOML file.",
)
@click.option(
    "-p",
    "--garden-path",
    "garden_path_opt",
    type=click.Path(path_type=Path),
    envvar="GARDEN_PATH",
    default=None,
    help="Garden directory to write into (env: GARDEN_PATH).",
)
@click.option("-v", "--verbose", count=True, help="Increase log verbosity.")
@click.pass_context
def cli(
    ctx: click.Context,
    config_path_opt: Path | None,
    garden_path_opt: Path | None,
    verbose: int,
) -> None:
    """Maintain your garden.

    Take notes in your favorite editor and file them by title.
    """

    ctx.ensure_object(dict)
    invoked = ctx.invoked_subcommand

    if invoked is None:
        click.echo(ctx.command.get_help(ctx))
        ctx.exit(0)

    setup_logging(verbose)
    ctx.obj["config_path"] = config_path_opt
    ctx.obj["garden_path"] = garden_path_opt


for register_command in (
    write.register,
    spark.register,
    config_cmd.register,
):
    register_command(cli)


def main(argv: Sequence[str] | None = None) -> int:
    args = list(argv) if argv is not None else None
    try:
        cli.main(args=args, prog_name="garden", standalone_mode=False)
    except click.ClickException as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.Abort:
        click.echo("Aborted!", err=True)
        return 1
    except SystemExit as exc:
        return int(exc.code or 0)
    return 0
