"""Configuration package."""

from release_on_push.config.settings import Settings, settings

__all__ = [
    "Settings",
    "settings",
]
