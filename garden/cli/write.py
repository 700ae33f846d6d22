"""Write command for the garden CLI."""

from __future__ import annotations

import click

from ..editor import launch_editor
from ..errors import GardenError
from ..services.write import write_note
from ._common import GardenCliError, get_app


@click.command(name="write")
@click.option(
    "-t",
    "--title",
    default=None,
    help="Title to name the note after instead of its first heading.",
)
@click.option(
    "-y",
    "--yes",
    "assume_yes",
    is_flag=True,
    help="Accept the inferred title without prompting.",
)
@click.pass_context
def write(ctx: click.Context, title: str | None, assume_yes: bool) -> None:
    """Write a new note in your editor and file it in the garden."""

    app = get_app(ctx)

    try:
        path = write_note(
            app.garden_dir,
            title,
            launch_fn=launch_editor,
            editor=app.config.editor,
            interactive=not assume_yes,
        )
    except GardenError as exc:
        raise GardenCliError(str(exc)) from exc

    click.echo(f"Created {path}")


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(write)
