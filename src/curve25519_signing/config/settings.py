"""Utilities for loading signing-core settings."""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from curve25519_signing.utils.logging import configure_logging

SETTINGS_FILENAME = "signing-config.json"
SETTINGS_ENV_VAR = "SIGNING_CONFIG_PATH"

_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class LoggingSettings:
    level: str = "INFO"
    json_output: bool = False
    log_file: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Optional[Dict[str, Any]]) -> "LoggingSettings":
        base = cls()
        if data is None:
            return base
        if not isinstance(data, dict):
            raise ValueError("Logging settings must be a JSON object")
        for key in data:
            if not hasattr(base, key):
                raise ValueError(f"Unknown logging setting '{key}'")
        level = data.get("level", base.level)
        if not isinstance(level, str) or level.upper() not in _LEVELS:
            raise ValueError(f"Unknown log level '{level}'")
        json_output = data.get("json_output", base.json_output)
        if not isinstance(json_output, bool):
            raise ValueError("json_output must be true or false")
        log_file = data.get("log_file")
        if log_file is not None and not isinstance(log_file, str):
            raise ValueError("log_file must be a string path")
        return cls(level=level.upper(), json_output=json_output, log_file=log_file or None)

    def apply(self) -> None:
        configure_logging(level=self.level, json_output=self.json_output, log_file=self.log_file)


def resolve_settings_path(config_dir: Path) -> Path:
    """Resolve the settings file, honouring the SIGNING_CONFIG_PATH override."""
    env_value = os.getenv(SETTINGS_ENV_VAR)
    if env_value:
        candidate = Path(env_value)
        if not candidate.is_absolute():
            candidate = (Path.cwd() / candidate).resolve()
        return candidate
    return (Path(config_dir) / SETTINGS_FILENAME).resolve()


def load_settings(config_dir: Path) -> Tuple[LoggingSettings, Path]:
    """
    Load logging settings.

    Returns:
        (settings, resolved_path); defaults when the file does not exist.

    Raises:
        ValueError: if the JSON is invalid or holds unknown settings.
    """
    path = resolve_settings_path(config_dir)
    if not path.exists():
        return LoggingSettings(), path
    try:
        data = json.loads(path.read_text())
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid settings JSON at {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"Settings at {path} must be a JSON object")
    try:
        return LoggingSettings.from_mapping(data.get("logging")), path
    except ValueError as exc:
        raise ValueError(f"Invalid settings at {path}: {exc}") from exc
