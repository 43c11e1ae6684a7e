"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click
    import typer

    from ._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    if argv[:1] in (["--version"], ["-v"]):
        from ..api.config.get_package_version import get_package_version

        print(f"postmore {get_package_version()}")
        return 0

    app = _create_app()
    try:
        rv = app(args=argv, prog_name="postmore", standalone_mode=False)
    except typer.Exit as e:
        return e.exit_code
    except click.exceptions.UsageError as e:
        typer.echo(f"Usage error: {e}", err=True)
        return 1
    except click.exceptions.Abort:
        typer.echo("Aborted", err=True)
        return 1
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
    return rv if isinstance(rv, int) else 0
