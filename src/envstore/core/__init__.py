"""
Core engine: variable store, placeholder resolution and file loading.
"""

from envstore.core.loader import DotEnv
from envstore.core.resolver import PlaceholderResolver, find_placeholders
from envstore.core.store import Entry, VariableStore

__all__ = [
    "DotEnv",
    "Entry",
    "PlaceholderResolver",
    "VariableStore",
    "find_placeholders",
]
