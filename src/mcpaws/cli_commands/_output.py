"""Shared CLI output formatters.

Everything goes to stderr: under ``serve`` stdout carries the protocol.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from mcpaws.server.registry import Tool

console = Console(stderr=True)


def print_tools_table(tools: list[Tool]) -> None:
    """Pretty-print tool descriptors as a table."""
    table = Table(title="Tools")
    table.add_column("Name", style="cyan")
    table.add_column("Description")
    table.add_column("Arguments")

    for tool in tools:
        props = tool.input_schema.properties
        args = ", ".join(
            f"{name}*" if name in tool.input_schema.required else name for name in props
        )
        table.add_row(tool.name, _truncate(tool.description), args or "-")

    console.print(table)


def print_tools_json(tools: list[Tool]) -> None:
    """Print tools exactly as ``tools/list`` would return them."""
    console.print_json(json.dumps({"tools": [tool.to_wire() for tool in tools]}))


def _truncate(text: str, max_len: int = 80) -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."
