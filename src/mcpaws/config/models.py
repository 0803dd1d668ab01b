"""Pydantic models for the settings YAML consumed by ``mcpaws serve``."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

from mcpaws import __version__
from mcpaws.protocol.models import DEFAULT_PROTOCOL_VERSION
from mcpaws.server.context import DEFAULT_REQUEST_TIMEOUT


class TelemetrySettings(BaseModel):
    """Optional telemetry configuration."""

    enabled: bool = False
    otlp_endpoint: str | None = None


class ServerSettings(BaseModel):
    """Top-level server settings.

    Example YAML::

        name: git-mcp
        version: "0.1.0"
        request_timeout: 30
        tools: [git_status, git_log]
        workdir: ${HOME}/code/project
        log_level: INFO
    """

    name: str = "mcpaws"
    version: str = __version__
    protocol_version: str = DEFAULT_PROTOCOL_VERSION
    request_timeout: float = Field(default=DEFAULT_REQUEST_TIMEOUT, gt=0)
    dispatch_notifications: bool = Field(
        default=False,
        description="Route notifications to their handlers (responses are never sent).",
    )
    tools: list[str] = Field(default_factory=lambda: ["git_status", "git_log"])
    workdir: Path | None = None
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    telemetry: TelemetrySettings | None = None
