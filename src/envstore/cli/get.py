"""
envstore get - Print one resolved value.
"""

from pathlib import Path

import typer

from envstore.cli.common import err_console, load_env_file


def get(
    env_file: Path = typer.Argument(..., help="Env file to load"),
    key: str = typer.Argument(..., help="Key to look up"),
    settings: Path | None = typer.Option(None, "--settings", "-s", help="YAML settings file"),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level"),
) -> None:
    """
    Load an env file and print the value of KEY (exit 1 when absent).

    Examples:
        envstore get .env DATABASE_URL
        envstore get .env DATABASE_URL --settings envstore.yaml
    """
    dotenv = load_env_file(env_file, settings, log_level)

    value = dotenv.get(key)
    if value is None:
        err_console.print(f"Key not found: {key}", highlight=False)
        raise typer.Exit(1)

    typer.echo(value)
