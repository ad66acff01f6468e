"""
Global env singleton.

Holds the one shared DotEnv an application loads into, plus a proxy that
gives dict-like access to it from anywhere.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from envstore.core.loader import DotEnv


class GlobalEnv:
    """Global DotEnv singleton manager."""

    _instance: DotEnv | None = None
    _lock = threading.Lock()

    @classmethod
    def set_env(cls, env: DotEnv | None) -> None:
        """Install ``env`` as the shared instance (None clears it)."""
        with cls._lock:
            cls._instance = env

    @classmethod
    def get_env(cls) -> DotEnv | None:
        """Get the shared instance, or None if nothing was loaded yet."""
        return cls._instance

    @classmethod
    def get_or_create(cls) -> DotEnv:
        """Get the shared instance, creating it with default settings on first use."""
        with cls._lock:
            if cls._instance is None:
                from envstore.core.loader import DotEnv

                cls._instance = DotEnv()
            return cls._instance

    @classmethod
    def reset_env(cls) -> None:
        """Release and forget the shared instance."""
        with cls._lock:
            instance, cls._instance = cls._instance, None
        if instance is not None:
            instance.release()


def get_env() -> DotEnv | None:
    """
    Get the global DotEnv instance.

    Returns:
        DotEnv instance if one was created, None otherwise
    """
    return GlobalEnv.get_env()


class EnvProxy:
    """
    Proxy object that provides dict-like access to the global env.

    Usage:
        from envstore import env
        api_key = env["API_KEY"]
        # or
        api_key = env.get("API_KEY", "")
    """

    def __getitem__(self, key: str) -> str:
        current = get_env()
        if current is None:
            raise RuntimeError("Env not loaded. Call envstore.load() first.")
        return current[key]

    def __contains__(self, key: str) -> bool:
        current = get_env()
        if current is None:
            return False
        return key in current

    def get(self, key: str, default: Any = None) -> Any:
        current = get_env()
        if current is None:
            return default
        return current.get(key, default)

    def __iter__(self) -> Iterator[str]:
        current = get_env()
        if current is None:
            return iter([])
        return iter(current)

    def keys(self):
        current = get_env()
        if current is None:
            return []
        return current.keys()

    def items(self):
        current = get_env()
        if current is None:
            return []
        return current.items()


env = EnvProxy()
