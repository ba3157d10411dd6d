from .loader import DEFAULT_CONFIG_PATH, Settings, load_settings, resolve_settings

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "Settings",
    "load_settings",
    "resolve_settings",
]
