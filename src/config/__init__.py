from .settings import EventDetails, Settings, get_settings, settings

__all__ = [
    "EventDetails",
    "Settings",
    "get_settings",
    "settings",
]
