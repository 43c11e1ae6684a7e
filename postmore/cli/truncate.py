"""Truncate Typer app factory - print a post body cut at its more marker."""

from pathlib import Path
from typing import Annotated

import typer

from ._context import get_config, get_display


def truncate() -> typer.Typer:
    """Create and configure the truncate Typer app."""
    app = typer.Typer(
        name="truncate",
        help="Cut a rendered post at its more marker and append a read-more link",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"], "allow_interspersed_args": True},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(
        ctx: typer.Context,
        path: Annotated[Path | None, typer.Argument(help="Rendered post body (UTF-8)")] = None,
        url: Annotated[str, typer.Option("--url", "-u", help="Read-more link target")] = "",
        text: Annotated[str | None, typer.Option("--text", "-t", help="Read-more link label")] = None,
    ) -> None:
        """Print the post body, truncated at <!--more--> or <!-- more -->.

        Bodies without a marker are printed unchanged.
        """
        if path is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

        _truncate_path(ctx, path, url, text)

    return app


def _truncate_path(ctx: typer.Context, path: Path, url: str, text: str | None) -> None:
    from ..api.excerpt.cmd_truncate import cmd_truncate
    from ._run_stage import _run_stage

    if text is None:
        text = get_config(ctx).link_text

    res = _run_stage(cmd_truncate, get_display(ctx), path, url, text)
    if not res.success:
        raise typer.Exit(1)
    typer.echo(res.output["content"], nl=False)
