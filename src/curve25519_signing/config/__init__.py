from .settings import (
    SETTINGS_ENV_VAR,
    SETTINGS_FILENAME,
    LoggingSettings,
    load_settings,
    resolve_settings_path,
)

__all__ = [
    "SETTINGS_ENV_VAR",
    "SETTINGS_FILENAME",
    "LoggingSettings",
    "load_settings",
    "resolve_settings_path",
]
