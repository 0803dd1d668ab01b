"""Server configuration — YAML settings validated with pydantic."""

from mcpaws.config.errors import ConfigError
from mcpaws.config.loader import SettingsLoader, load_settings
from mcpaws.config.models import ServerSettings, TelemetrySettings

__all__ = [
    "ConfigError",
    "ServerSettings",
    "SettingsLoader",
    "TelemetrySettings",
    "load_settings",
]
