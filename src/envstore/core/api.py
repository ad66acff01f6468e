"""
Process-wide API.

load/get/release operate on the shared DotEnv held by GlobalEnv, which is
created lazily by the first load().
"""

from pathlib import Path
from typing import Any

from envstore.config.singleton import GlobalEnv


def load(path: str | Path) -> int:
    """
    Load an env file into the shared store.

    Args:
        path: Path to the env file

    Returns:
        Number of entries inserted

    Examples:
        import envstore

        envstore.load(".env")
        token = envstore.get("API_TOKEN")
        envstore.release()
    """
    return GlobalEnv.get_or_create().load(path)


def get(key: str, default: Any = None) -> Any:
    """Get a value from the shared store, or ``default`` when absent or nothing is loaded."""
    current = GlobalEnv.get_env()
    if current is None:
        return default
    return current.get(key, default)


def release() -> None:
    """Drop every entry in the shared store. Safe to call when nothing was loaded."""
    current = GlobalEnv.get_env()
    if current is not None:
        current.release()
