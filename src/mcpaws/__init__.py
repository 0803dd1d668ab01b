"""mcpaws — a small Model Context Protocol server engine over stdio."""

from __future__ import annotations

from typing import TYPE_CHECKING

__version__ = "0.1.0"

if TYPE_CHECKING:
    from mcpaws.server.server import MCPServer as MCPServer

_SERVER_EXPORTS = {
    "MCPServer": "mcpaws.server.server",
}


def __getattr__(name: str) -> object:
    module_path = _SERVER_EXPORTS.get(name)
    if module_path is not None:
        import importlib

        mod = importlib.import_module(module_path)
        return getattr(mod, name)
    raise AttributeError(f"module 'mcpaws' has no attribute {name!r}")
