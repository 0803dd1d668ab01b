"""Bundled tools that a server can be configured to expose."""

from __future__ import annotations

from pathlib import Path

from mcpaws.config.errors import ConfigError
from mcpaws.server.registry import Tool
from mcpaws.tools.git import git_tools


def available_tools(workdir: Path | None = None) -> dict[str, Tool]:
    """Return every bundled tool keyed by name."""
    return {tool.name: tool for tool in git_tools(workdir)}


def build_tools(names: list[str], workdir: Path | None = None) -> list[Tool]:
    """Select bundled tools by name, in the order given.

    Raises:
        ConfigError: If a name does not match any bundled tool.
    """
    catalog = available_tools(workdir)
    unknown = [name for name in names if name not in catalog]
    if unknown:
        known = ", ".join(sorted(catalog))
        raise ConfigError(f"Unknown tool(s): {', '.join(unknown)} (available: {known})")
    return [catalog[name] for name in names]


__all__ = ["available_tools", "build_tools", "git_tools"]
