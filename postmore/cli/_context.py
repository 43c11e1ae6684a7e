"""Shared objects stored on the Typer context by the main callback."""

import typer

from ..api.config.PostMoreConfig import PostMoreConfig
from .display import CLIDisplay


def _find_obj(ctx: typer.Context | None) -> dict:
    # Walk up context tree to find the dict set by main_callback
    while ctx is not None:
        if isinstance(ctx.obj, dict):
            return ctx.obj
        ctx = ctx.parent
    return {}


def get_display(ctx: typer.Context) -> CLIDisplay:
    display = _find_obj(ctx).get("display")
    return display if isinstance(display, CLIDisplay) else CLIDisplay()


def get_config(ctx: typer.Context) -> PostMoreConfig:
    config = _find_obj(ctx).get("config")
    return config if isinstance(config, PostMoreConfig) else PostMoreConfig.load()
