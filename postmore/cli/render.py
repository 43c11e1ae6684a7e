"""Render Typer app factory - render a Jinja2 template with the excerpt filter."""

from pathlib import Path
from typing import Annotated, Any

import typer

from ._context import get_display


def _parse_assignments(assignments: list[str]) -> dict[str, Any]:
    """Parse KEY=VALUE strings into a context dict.

    Auto-converts 'true'/'false' to bool and digits to int.
    """
    variables: dict[str, Any] = {}
    for item in assignments:
        key, sep, raw = item.partition("=")
        key = key.strip()
        if not sep or not key:
            raise typer.BadParameter(f"expected KEY=VALUE, got {item!r}", param_hint="--set")
        value: Any = raw
        if raw.lower() == "true":
            value = True
        elif raw.lower() == "false":
            value = False
        elif raw.isdigit():
            value = int(raw)
        variables[key] = value
    return variables


def render() -> typer.Typer:
    """Create and configure the render Typer app."""
    app = typer.Typer(
        name="render",
        help="Render a Jinja2 template with the excerpt filter installed",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"], "allow_interspersed_args": True},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(
        ctx: typer.Context,
        template: Annotated[Path | None, typer.Argument(help="Template file")] = None,
        assignments: Annotated[
            list[str] | None, typer.Option("--set", "-s", help="Template variable as KEY=VALUE (repeatable)")
        ] = None,
        content: Annotated[
            Path | None, typer.Option("--content", "-c", help="File loaded into the 'content' variable")
        ] = None,
    ) -> None:
        """Render TEMPLATE to stdout.

        Example template: {{ content | postmore(url, "Read more") }}
        """
        if template is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

        variables = _parse_assignments(assignments or [])
        if content is not None:
            try:
                variables["content"] = content.read_bytes().decode("utf-8")
            except (OSError, UnicodeDecodeError) as e:
                get_display(ctx).error(f"Cannot read {content}: {e}")
                raise typer.Exit(1) from None

        _render_template(ctx, template, variables)

    return app


def _render_template(ctx: typer.Context, template: Path, variables: dict[str, Any]) -> None:
    from ..api.excerpt.cmd_render import cmd_render
    from ._run_stage import _run_stage

    res = _run_stage(cmd_render, get_display(ctx), template, variables)
    if not res.success:
        raise typer.Exit(1)
    typer.echo(res.output["content"])
