"""Create the main Typer CLI app."""

import typer

from ..api.config.ConfigError import ConfigError
from ..api.config.PostMoreConfig import PostMoreConfig
from ..utils.logger import configure_logging
from .display import CLIDisplay
from .render import render
from .truncate import truncate


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="postmore CLI - read-more excerpts for rendered posts",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    app.add_typer(truncate(), name="truncate")
    app.add_typer(render(), name="render")

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        quiet: bool = typer.Option(False, "--quiet", "-q", help="Only report errors on stderr"),
    ) -> None:
        display = CLIDisplay(quiet=quiet)
        try:
            config = PostMoreConfig.load()
        except ConfigError as e:
            display.error(str(e))
            raise typer.Exit(1) from None

        configure_logging(level=config.log_level)

        ctx.ensure_object(dict)
        ctx.obj["config"] = config
        ctx.obj["display"] = display

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    return app
