"""ServerRunner — wires settings, bundled tools, and the stdio transport."""

from __future__ import annotations

import logging
from pathlib import Path

from mcpaws.config.loader import SettingsLoader
from mcpaws.config.models import ServerSettings
from mcpaws.server.server import MCPServer
from mcpaws.server.transport import ServerTransport, StdioTransport
from mcpaws.tools import build_tools
from mcpaws.utils.telemetry import configure_telemetry

logger = logging.getLogger(__name__)


class ServerRunner:
    """Build and run an :class:`MCPServer` from validated settings."""

    def __init__(self, settings: ServerSettings) -> None:
        self.settings = settings

    @classmethod
    def from_yaml(cls, path: str | Path) -> ServerRunner:
        """Load a settings YAML and return a ready-to-run runner."""
        return cls(SettingsLoader(Path(path)).load())

    def build(self) -> MCPServer:
        """Create the server and register the configured tools.

        Raises:
            ConfigError: If the settings name an unknown tool.
        """
        s = self.settings
        server = MCPServer(
            name=s.name,
            version=s.version,
            protocol_version=s.protocol_version,
            request_timeout=s.request_timeout,
            dispatch_notifications=s.dispatch_notifications,
        )
        for tool in build_tools(s.tools, s.workdir):
            server.add_tool(tool)
        logger.info("Registered %d tool(s): %s", len(server.registry), ", ".join(s.tools) or "-")
        return server

    async def run(self, transport: ServerTransport | None = None) -> None:
        """Serve until the input stream ends (stdio unless *transport* is given)."""
        if self.settings.telemetry is not None and self.settings.telemetry.enabled:
            configure_telemetry(
                service_name=self.settings.name,
                otlp_endpoint=self.settings.telemetry.otlp_endpoint,
            )

        server = self.build()
        if transport is None:
            transport = await StdioTransport.connect()
        try:
            await server.serve(transport)
        finally:
            await transport.close()
