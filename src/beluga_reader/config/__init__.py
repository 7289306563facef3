"""Config package."""

from beluga_reader.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
