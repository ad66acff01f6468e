"""
envstore exception hierarchy.

All domain-specific exceptions inherit from EnvStoreError, making it easy
to catch any library error with a single base class while still allowing
fine-grained handling when needed.

Hierarchy::

    EnvStoreError
    ├── ConfigurationError          - settings loading, parsing, validation
    ├── EnvFileError                - env file unreadable or undecodable
    └── StoreError                  - variable store misuse
        ├── StoreNotInitializedError - insert before initialize / after reset
        └── AllocationError         - capacity could not be reserved

Malformed env lines (no ``=``, empty key) are not errors; they are skipped.
"""

from __future__ import annotations


class EnvStoreError(Exception):
    """Base exception for all envstore errors."""

    def __init__(self, message: str, *, details: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


# --- Configuration -----------------------------------------------------------


class ConfigurationError(EnvStoreError):
    """Raised when settings loading, parsing, or validation fails."""


# --- Env files ---------------------------------------------------------------


class EnvFileError(EnvStoreError):
    """Raised when an env file exists but cannot be read or decoded."""

    def __init__(self, message: str, *, path: str | None = None) -> None:
        super().__init__(message, details={"path": path})
        self.path = path


# --- Store -------------------------------------------------------------------


class StoreError(EnvStoreError):
    """Raised when the variable store is used incorrectly."""


class StoreNotInitializedError(StoreError):
    """Raised when inserting into a store that has not been initialized."""


class AllocationError(StoreError):
    """Raised when the store cannot reserve capacity for more entries."""

    def __init__(self, message: str, *, requested: int | None = None, capacity: int | None = None) -> None:
        super().__init__(message, details={"requested": requested, "capacity": capacity})
        self.requested = requested
        self.capacity = capacity
