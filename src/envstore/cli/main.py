"""
Main CLI entry point.
"""

import typer

from envstore import __version__
from envstore.cli import get, show


def version_callback(value: bool):
    """Callback to display version and exit."""
    if value:
        typer.echo(f"envstore version {__version__}")
        raise typer.Exit()


app = typer.Typer(
    name="envstore",
    help="envstore - load and inspect .env files",
    add_completion=False,
)

app.command("show")(show.show)
app.command("get")(get.get)


@app.callback(invoke_without_command=True)
def entrypoint(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
):
    """
    envstore - load and inspect .env files.

    Run 'envstore <command> --help' for help on a specific command.
    """
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def main():
    """Main CLI entry point."""
    app()


if __name__ == "__main__":
    main()
