"""Config command for the garden CLI."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from ..config import DEFAULT_CONFIG_PATH, ConfigError, bootstrap_config_file, load_config
from ..editor import resolve_editor
from ._common import GardenCliError

log = logging.getLogger(__name__)


@click.command(name="config")
@click.pass_context
def config(ctx: click.Context) -> None:
    """Open the garden configuration file in the editor."""

    selected_path: Path | None = ctx.obj.get("config_path")
    config_path = selected_path or DEFAULT_CONFIG_PATH

    created = bootstrap_config_file(config_path)

    # A broken file still has to be editable, so fall back to the environment.
    configured_editor: str | None = None
    try:
        configured_editor = load_config(config_path).editor
    except ConfigError as exc:
        log.warning("Ignoring configured editor: %s", exc)

    try:
        click.edit(filename=str(config_path), editor=resolve_editor(configured_editor))
    except click.ClickException as exc:
        raise GardenCliError(f"Failed to launch editor: {exc.format_message()}") from exc

    if created:
        click.echo(f"Created configuration at {config_path}")
    click.echo(f"Opened configuration at {config_path}")


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(config)
