"""
envstore - load .env-style files into a thread-safe in-process store.

Supports inline comments, quoted values and ``${NAME}`` placeholders
resolved against entries loaded earlier in the same file.
"""

__version__ = "0.1.0"

# Process-wide API
from envstore.config.singleton import env
from envstore.core.api import get, load, release

# Core
from envstore.config.settings import LoaderSettings, Settings, load_settings
from envstore.core.loader import DotEnv
from envstore.core.resolver import PlaceholderResolver
from envstore.core.store import Entry, VariableStore

# Exceptions
from envstore.exceptions import (
    AllocationError,
    ConfigurationError,
    EnvFileError,
    EnvStoreError,
    StoreError,
    StoreNotInitializedError,
)

# Logging utilities
from envstore.utils.logging import get_logger, setup_logging, setup_logging_from_config

__all__ = [
    # Process-wide API
    "load",
    "get",
    "release",
    "env",
    # Core
    "DotEnv",
    "VariableStore",
    "Entry",
    "PlaceholderResolver",
    # Settings
    "LoaderSettings",
    "Settings",
    "load_settings",
    # Logging
    "setup_logging",
    "setup_logging_from_config",
    "get_logger",
    # Exceptions
    "EnvStoreError",
    "ConfigurationError",
    "EnvFileError",
    "StoreError",
    "StoreNotInitializedError",
    "AllocationError",
]
