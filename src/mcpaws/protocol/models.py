"""MCP models — JSON-RPC 2.0 messages and MCP payloads.

Implements the message format used by the Model Context Protocol for
capability negotiation (``initialize``), tool discovery (``tools/list``)
and execution (``tools/call``).  Params and results stay as parsed,
untyped JSON until a handler asks for a concrete shape.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

JSONRPC_VERSION = "2.0"
DEFAULT_PROTOCOL_VERSION = "2025-06-18"

# ---------------------------------------------------------------------------
# JSON-RPC 2.0 envelope
# ---------------------------------------------------------------------------


class JsonRpcRequest(BaseModel):
    """A JSON-RPC 2.0 request or notification.

    A missing or ``null`` id marks a notification.
    """

    jsonrpc: str = JSONRPC_VERSION
    id: Any = None
    method: str = ""
    params: Any = None

    @property
    def is_notification(self) -> bool:
        return self.id is None


class JsonRpcError(BaseModel):
    """A JSON-RPC 2.0 error object."""

    code: int
    message: str


class JsonRpcResponse(BaseModel):
    """A JSON-RPC 2.0 response message.

    Exactly one of ``result`` / ``error`` is emitted on the wire; a
    success response keeps ``result`` even when it is ``null``.
    """

    jsonrpc: str = JSONRPC_VERSION
    id: Any = None
    result: Any = None
    error: JsonRpcError | None = None

    @classmethod
    def success(cls, request_id: Any, result: Any) -> JsonRpcResponse:
        return cls(id=request_id, result=result)

    @classmethod
    def failure(cls, request_id: Any, code: int, message: str) -> JsonRpcResponse:
        return cls(id=request_id, error=JsonRpcError(code=code, message=message))

    @property
    def is_error(self) -> bool:
        return self.error is not None

    def to_wire(self) -> dict[str, Any]:
        """Return the envelope as a plain dict in wire shape."""
        data: dict[str, Any] = {"jsonrpc": self.jsonrpc, "id": self.id}
        if self.error is not None:
            data["error"] = self.error.model_dump()
        else:
            data["result"] = self.result
        return data


# ---------------------------------------------------------------------------
# MCP-specific payloads
# ---------------------------------------------------------------------------


class ToolsCapability(BaseModel):
    """Marker advertising that the server exposes tools."""


class Capabilities(BaseModel):
    """Feature flags advertised during ``initialize``."""

    model_config = ConfigDict(frozen=True)

    tools: ToolsCapability | None = Field(default_factory=ToolsCapability)


class ServerInfo(BaseModel):
    """Name and version reported to the client."""

    model_config = ConfigDict(frozen=True)

    name: str
    version: str


class ServerIdentity(BaseModel):
    """Everything ``initialize`` reports; fixed once the server is built."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    protocol_version: str = Field(alias="protocolVersion")
    capabilities: Capabilities = Field(default_factory=Capabilities)
    server_info: ServerInfo = Field(alias="serverInfo")

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class ToolCallParams(BaseModel):
    """The ``tools/call`` params envelope.

    ``arguments`` is forwarded to the tool untouched.
    """

    name: str
    arguments: Any = None


class ToolContent(BaseModel):
    """One content block of a tool result."""

    type: str = "text"
    text: str


class ToolCallResult(BaseModel):
    """Conventional MCP tool result: a list of content blocks."""

    content: list[ToolContent] = Field(default_factory=list)

    @classmethod
    def from_text(cls, text: str) -> ToolCallResult:
        return cls(content=[ToolContent(text=text)])
