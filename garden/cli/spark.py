"""Spark command for the garden CLI."""

from __future__ import annotations

import click

from ..services.spark import SparkError, append_spark
from ._common import GardenCliError, get_app


@click.command(name="spark")
@click.option("-m", "--message", required=True, help="Thought to jot down.")
@click.pass_context
def spark(ctx: click.Context, message: str) -> None:
    """Append a quick thought to the garden's sparkfile.

    A sparkfile collects ideas you have now so you can work on them later.
    """

    app = get_app(ctx)
    try:
        append_spark(app.garden_dir, message)
    except SparkError as exc:
        raise GardenCliError(str(exc)) from exc


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(spark)
