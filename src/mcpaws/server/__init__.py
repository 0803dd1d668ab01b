"""Server layer — tool registry, method dispatch, and the protocol loop."""

from mcpaws.server.context import RequestContext
from mcpaws.server.dispatcher import MethodDispatcher
from mcpaws.server.handler import Handler
from mcpaws.server.registry import InputSchema, Property, Tool, ToolRegistry
from mcpaws.server.server import MCPServer
from mcpaws.server.transport import ServerTransport, StdioTransport, StreamTransport

__all__ = [
    "Handler",
    "InputSchema",
    "MCPServer",
    "MethodDispatcher",
    "Property",
    "RequestContext",
    "ServerTransport",
    "StdioTransport",
    "StreamTransport",
    "Tool",
    "ToolRegistry",
]
