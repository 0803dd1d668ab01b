"""Built-in lifecycle handlers: ``initialize``, ``tools/list``, ``tools/call``."""

from __future__ import annotations

from typing import Any

from opentelemetry import trace
from pydantic import ValidationError

from mcpaws.protocol.errors import InvalidParamsError
from mcpaws.protocol.models import ServerIdentity, ToolCallParams
from mcpaws.server.context import RequestContext
from mcpaws.server.registry import ToolRegistry
from mcpaws.utils.telemetry import ATTR_TOOL_NAME

METHOD_INITIALIZE = "initialize"
METHOD_TOOLS_LIST = "tools/list"
METHOD_TOOLS_CALL = "tools/call"
# Dispatch key some clients send for tool invocation.
METHOD_CALL = "call"


class BuiltinHandlers:
    """The three handlers every server starts with.

    Each method follows the :data:`~mcpaws.server.handler.Handler`
    convention so it can be registered on a dispatcher as-is.
    """

    def __init__(self, identity: ServerIdentity, registry: ToolRegistry) -> None:
        self._identity = identity
        self._registry = registry

    async def initialize(self, ctx: RequestContext, params: Any) -> dict[str, Any]:
        """Report protocol version, capabilities, and server info.

        Params are ignored and no session state is kept, so repeated
        calls return the same record.
        """
        return self._identity.to_wire()

    async def list_tools(self, ctx: RequestContext, params: Any) -> dict[str, Any]:
        """Return every registered tool without its callable."""
        return {"tools": [tool.to_wire() for tool in self._registry.list()]}

    async def call_tool(self, ctx: RequestContext, params: Any) -> Any:
        """Forward ``arguments`` to the named tool and return its outcome."""
        try:
            call = ToolCallParams.model_validate(params)
        except ValidationError as exc:
            raise InvalidParamsError(_first_error(exc)) from exc
        trace.get_current_span().set_attribute(ATTR_TOOL_NAME, call.name)
        return await self._registry.invoke(call.name, ctx, call.arguments)


def _first_error(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    err = errors[0]
    loc = ".".join(str(part) for part in err.get("loc", ())) or "params"
    return f"{loc}: {err.get('msg', 'invalid value')}"
