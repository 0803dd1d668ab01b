"""ToolRegistry — name-keyed bookkeeping for the tools a server exposes."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from mcpaws.protocol.errors import ToolNotFoundError
from mcpaws.server.context import RequestContext
from mcpaws.server.handler import Handler, call_handler

logger = logging.getLogger(__name__)


class Property(BaseModel):
    """One property of a tool's input schema."""

    type: str
    description: str = ""
    default: Any = None


class InputSchema(BaseModel):
    """JSON-schema-shaped description of a tool's arguments.

    Advertised to clients only; arguments are never validated against it.
    """

    type: str = "object"
    properties: dict[str, Property] = Field(default_factory=dict)
    required: list[str] = Field(default_factory=list)


class Tool(BaseModel):
    """A tool descriptor: what ``tools/list`` advertises plus the callable.

    ``invoke`` receives the request context and the raw ``arguments`` value
    of a ``tools/call`` request; it is never serialized.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str
    description: str = ""
    input_schema: InputSchema = Field(default_factory=InputSchema, alias="inputSchema")
    invoke: Handler = Field(exclude=True, repr=False)

    def to_wire(self) -> dict[str, Any]:
        """Return the ``tools/list`` entry for this tool."""
        return self.model_dump(by_alias=True, exclude_none=True)


class ToolRegistry:
    """Holds tool descriptors keyed by name.

    Usage::

        registry = ToolRegistry()
        registry.register(Tool(name="echo", invoke=echo))

        registry.list()                                   # [Tool(name='echo', ...)]
        result = await registry.invoke("echo", ctx, {"text": "hi"})

    Re-registering a name replaces the descriptor in place.
    """

    def __init__(self) -> None:
        self._tools: dict[str, Tool] = {}

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def register(self, tool: Tool) -> None:
        """Insert *tool*, overwriting any tool with the same name."""
        if tool.name in self._tools:
            logger.debug("Replacing tool %s", tool.name)
        self._tools[tool.name] = tool

    def list(self) -> list[Tool]:
        """Return all descriptors in first-registration order."""
        return list(self._tools.values())

    def get(self, name: str) -> Tool:
        tool = self._tools.get(name)
        if tool is None:
            raise ToolNotFoundError(name)
        return tool

    async def invoke(self, name: str, ctx: RequestContext, arguments: Any) -> Any:
        """Call the named tool with its raw arguments and return its outcome."""
        tool = self.get(name)
        return await call_handler(tool.invoke, ctx, arguments)
