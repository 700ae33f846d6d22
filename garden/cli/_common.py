"""Shared helpers for garden CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import click

from ..app import AppContext, bootstrap
from ..config import ConfigError

CONTEXT_SETTINGS: dict[str, Any] = {"help_option_names": ["-h", "--help"]}


class GardenCliError(click.ClickException):
    """Shared Click exception wrapper for CLI failures."""


def get_app(ctx: click.Context) -> AppContext:
    """Return a cached AppContext for the current CLI invocation."""

    app: AppContext | None = ctx.obj.get("app")
    if app is not None:
        return app

    config_path_opt: Path | None = ctx.obj.get("config_path")
    garden_path_opt: Path | None = ctx.obj.get("garden_path")

    try:
        app = bootstrap(config_path_opt, garden_path_opt)
    except ConfigError as exc:
        raise GardenCliError(str(exc)) from exc

    ctx.obj["app"] = app
    return app
