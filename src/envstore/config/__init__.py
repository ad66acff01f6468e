"""
Settings management and the shared env instance.
"""

from envstore.config.settings import LoaderSettings, Settings, load_settings

__all__ = [
    "LoaderSettings",
    "Settings",
    "load_settings",
]
