"""
Env file loading.

DotEnv owns one VariableStore and feeds it line by line: each line is
parsed, its value resolved against entries already in the store, and the
result inserted. The store lock is taken per insert and per placeholder
lookup, so concurrent loads interleave at line granularity.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Any

from envstore.config.settings import LoaderSettings
from envstore.core.resolver import PlaceholderResolver
from envstore.core.store import VariableStore
from envstore.exceptions import EnvFileError
from envstore.parser import parse_line
from envstore.utils.logging import get_logger

logger = get_logger("envstore.core.loader")


class DotEnv:
    """
    Loaded env entries with dict-like read access.

    Usage:
        with DotEnv() as env:
            env.load(".env")
            db_url = env.get("DATABASE_URL")
    """

    def __init__(self, settings: LoaderSettings | None = None, store: VariableStore | None = None):
        self.settings = settings or LoaderSettings()
        self.settings.validate()
        self.store = store if store is not None else VariableStore(max_capacity=self.settings.max_capacity)
        self.resolver = PlaceholderResolver(
            self.store.lookup,
            max_name_length=self.settings.max_name_length,
            keep_unterminated=self.settings.keep_unterminated,
        )

    def load(self, path: str | Path) -> int:
        """
        Load entries from an env file.

        Entries inserted before a failure stay in the store.

        Args:
            path: Path to the env file

        Returns:
            Number of entries inserted

        Raises:
            FileNotFoundError: If the path does not exist or is not a file
            PermissionError: If the file cannot be opened for reading
            EnvFileError: If the file cannot be read or decoded
            AllocationError: If the store cannot grow
        """
        env_path = Path(path)

        if not env_path.exists():
            logger.error(f"Env file not found: {env_path}")
            raise FileNotFoundError(f"Env file not found: {env_path}")

        if not env_path.is_file():
            logger.error(f"Env path is not a file: {env_path}")
            raise FileNotFoundError(f"Env path is not a file: {env_path}")

        try:
            # Split on "\n" only and leave "\r\n" untranslated; parse_line strips either
            with open(env_path, encoding=self.settings.encoding, newline="\n") as f:
                return self.load_lines(f, source=str(env_path))
        except PermissionError as e:
            logger.error(f"Permission denied reading env file: {env_path}")
            raise PermissionError(
                f"Permission denied reading env file: {env_path}\n"
                f"  Error: {e}\n"
                f"  Suggestion: Check file permissions"
            ) from e
        except UnicodeDecodeError as e:
            logger.error(f"Env file is not valid {self.settings.encoding}: {env_path}")
            raise EnvFileError(
                f"Failed to decode env file {env_path} as {self.settings.encoding}: {e}", path=str(env_path)
            ) from e
        except OSError as e:
            logger.error(f"Failed to read env file {env_path}: {e}")
            raise EnvFileError(f"Failed to read env file {env_path}: {e}", path=str(env_path)) from e

    def load_lines(self, lines: Iterable[str], source: str = "<lines>") -> int:
        """
        Load entries from an iterable of raw lines (terminators optional).

        Returns:
            Number of entries inserted
        """
        self.store.initialize(self.settings.initial_capacity)

        inserted = 0
        for lineno, raw in enumerate(lines, 1):
            parsed = parse_line(raw, self.settings.max_line_length)
            if parsed is None:
                logger.debug(f"{source}:{lineno}: skipped")
                continue

            value = self.resolver.resolve(parsed.raw_value)
            self.store.insert(parsed.key, value)
            inserted += 1

        logger.info(f"Loaded {inserted} entries from {source}")
        return inserted

    def loads(self, text: str, source: str = "<string>") -> int:
        """Load entries from env-formatted text."""
        return self.load_lines(text.splitlines(keepends=True), source=source)

    def get(self, key: str, default: Any = None) -> Any:
        """Get the first-loaded value for ``key``, or ``default``."""
        value = self.store.lookup(key)
        return default if value is None else value

    def release(self) -> None:
        """Drop every loaded entry; a later load starts from scratch."""
        self.store.reset()
        logger.debug("Released all entries")

    def __getitem__(self, key: str) -> str:
        value = self.store.lookup(key)
        if value is None:
            raise KeyError(f"Env key '{key}' not found")
        return value

    def __contains__(self, key: object) -> bool:
        return key in self.store

    def __iter__(self) -> Iterator[str]:
        return iter(self.store.as_dict())

    def __len__(self) -> int:
        return len(self.store.as_dict())

    def keys(self):
        return self.store.as_dict().keys()

    def values(self):
        return self.store.as_dict().values()

    def items(self):
        return self.store.as_dict().items()

    def __enter__(self) -> DotEnv:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()

    def __repr__(self) -> str:
        return f"DotEnv({self.store!r})"
