"""
Shared CLI helpers.
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from envstore.config.settings import load_settings
from envstore.core.loader import DotEnv
from envstore.exceptions import EnvStoreError
from envstore.utils.logging import setup_logging, setup_logging_from_config

err_console = Console(stderr=True)


def load_env_file(env_file: Path, settings_path: Path | None, log_level: str | None) -> DotEnv:
    """Build a DotEnv from CLI options and load ``env_file`` into it; exit 2 on failure."""
    try:
        if settings_path is not None:
            settings = load_settings(settings_path)
            if log_level:
                settings.logging["level"] = log_level
            setup_logging_from_config({"logging": settings.logging}, project_dir=settings_path.parent)
            dotenv = DotEnv(settings.loader)
        else:
            setup_logging(level=log_level or "WARNING")
            dotenv = DotEnv()

        dotenv.load(env_file)
    except (OSError, EnvStoreError) as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        raise typer.Exit(2) from e

    return dotenv
