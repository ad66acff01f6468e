"""
envstore show - Display the entries of an env file.
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from envstore.cli.common import load_env_file

console = Console()


def show(
    env_file: Path = typer.Argument(..., help="Env file to load"),
    settings: Path | None = typer.Option(None, "--settings", "-s", help="YAML settings file"),
    show_all: bool = typer.Option(False, "--all", "-a", help="Include duplicate keys"),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level"),
) -> None:
    """
    Load an env file and print its resolved entries.

    Examples:
        envstore show .env
        envstore show .env --all --settings envstore.yaml
    """
    dotenv = load_env_file(env_file, settings, log_level)

    if show_all:
        rows = [(entry.key, entry.value) for entry in dotenv.store.entries()]
    else:
        rows = list(dotenv.items())

    if not rows:
        console.print("[yellow]No entries found[/yellow]")
        return

    table = Table(title=Text(str(env_file)), show_header=True)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="green")

    for index, (key, value) in enumerate(rows, 1):
        table.add_row(str(index), Text(key), Text(value))

    console.print(table)
    console.print(f"\n[dim]{len(rows)} entries[/dim]")
