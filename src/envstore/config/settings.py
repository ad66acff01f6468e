"""
Loader settings.

Settings come from code defaults or from a YAML file of the form::

    loader:
      initial_capacity: 10
      max_line_length: 1024
      max_name_length: 255
      max_capacity: null
      keep_unterminated: false
      encoding: utf-8
    logging:
      level: INFO
      file: logs/envstore.log
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

from envstore.exceptions import ConfigurationError

DEFAULT_SETTINGS_FILE = "envstore.yaml"


@dataclass
class LoaderSettings:
    """Tunables for parsing, resolution and store sizing."""

    initial_capacity: int = 10
    max_line_length: int = 1024
    max_name_length: int = 255
    max_capacity: int | None = None
    keep_unterminated: bool = False
    encoding: str = "utf-8"

    def validate(self) -> None:
        """Validate every field, reporting all problems at once."""
        errors = []

        for name in ("initial_capacity", "max_line_length", "max_name_length"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                errors.append(f"'{name}' must be a positive integer, got {value!r}")

        if self.max_capacity is not None:
            if isinstance(self.max_capacity, bool) or not isinstance(self.max_capacity, int) or self.max_capacity < 1:
                errors.append(f"'max_capacity' must be a positive integer or null, got {self.max_capacity!r}")
            elif isinstance(self.initial_capacity, int) and self.max_capacity < self.initial_capacity:
                errors.append(
                    f"'max_capacity' ({self.max_capacity}) is smaller than 'initial_capacity' ({self.initial_capacity})"
                )

        if not isinstance(self.keep_unterminated, bool):
            errors.append(f"'keep_unterminated' must be true or false, got {self.keep_unterminated!r}")

        if not isinstance(self.encoding, str) or not self.encoding:
            errors.append(f"'encoding' must be a non-empty string, got {self.encoding!r}")
        else:
            try:
                codecs.lookup(self.encoding)
            except LookupError:
                errors.append(f"'encoding' is not a known codec: {self.encoding!r}")

        if errors:
            raise ConfigurationError("Invalid loader settings:\n  " + "\n  ".join(errors), details={"errors": errors})

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LoaderSettings:
        """Build settings from a mapping, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(
                f"Unknown loader setting(s): {', '.join(unknown)}\n"
                f"  Suggestion: valid keys are {', '.join(sorted(known))}",
                details={"unknown": unknown},
            )
        settings = cls(**data)
        settings.validate()
        return settings


@dataclass
class Settings:
    """Complete settings: loader tunables plus the raw logging section."""

    loader: LoaderSettings = field(default_factory=LoaderSettings)
    logging: dict[str, Any] = field(default_factory=dict)
    source: Path | None = None


def load_settings(path: str | Path | None = None) -> Settings:
    """
    Load settings from a YAML file.

    Args:
        path: Settings file (default: envstore.yaml in the current directory)

    Returns:
        Settings instance; an empty file yields the defaults

    Raises:
        FileNotFoundError: If the file does not exist
        ConfigurationError: If the YAML is invalid or a value is rejected
    """
    settings_path = Path(path) if path is not None else Path.cwd() / DEFAULT_SETTINGS_FILE

    if not settings_path.exists():
        raise FileNotFoundError(
            f"Settings file not found: {settings_path}\n"
            f"  Suggestion: Create a {DEFAULT_SETTINGS_FILE} file or pass an explicit path"
        )

    if not settings_path.is_file():
        raise FileNotFoundError(f"Settings path is not a file: {settings_path}")

    try:
        with open(settings_path, encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                error_msg = str(e)
                mark = getattr(e, "problem_mark", None)
                if mark is not None:
                    raise ConfigurationError(
                        f"Error parsing {settings_path.name} at line {mark.line + 1}, column {mark.column + 1}:\n"
                        f"  {error_msg}\n"
                        f"  File: {settings_path}",
                        details={"line": mark.line + 1, "column": mark.column + 1},
                    ) from e
                raise ConfigurationError(f"Error parsing {settings_path.name}: {error_msg}\n  File: {settings_path}") from e
    except PermissionError as e:
        raise PermissionError(
            f"Permission denied reading settings: {settings_path}\n"
            f"  Error: {e}\n"
            f"  Suggestion: Check file permissions"
        ) from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Settings must be a mapping, got {type(data).__name__}")

    loader_data = data.get("loader") or {}
    if not isinstance(loader_data, dict):
        raise ConfigurationError(f"Settings 'loader' must be a mapping, got {type(loader_data).__name__}")

    logging_data = data.get("logging") or {}
    if not isinstance(logging_data, dict):
        raise ConfigurationError(f"Settings 'logging' must be a mapping, got {type(logging_data).__name__}")

    return Settings(loader=LoaderSettings.from_dict(loader_data), logging=logging_data, source=settings_path)
