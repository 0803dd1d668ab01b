"""Protocol layer — JSON-RPC envelopes, MCP payloads, and error codes."""

from mcpaws.protocol.codec import decode_request, encode_response
from mcpaws.protocol.errors import (
    InvalidParamsError,
    MethodNotFoundError,
    ParseError,
    ProtocolError,
    RequestTimeoutError,
    SerializationError,
    ToolExecutionError,
    ToolNotFoundError,
)
from mcpaws.protocol.models import (
    Capabilities,
    JsonRpcError,
    JsonRpcRequest,
    JsonRpcResponse,
    ServerIdentity,
    ServerInfo,
    ToolCallParams,
    ToolCallResult,
    ToolContent,
)

__all__ = [
    "Capabilities",
    "InvalidParamsError",
    "JsonRpcError",
    "JsonRpcRequest",
    "JsonRpcResponse",
    "MethodNotFoundError",
    "ParseError",
    "ProtocolError",
    "RequestTimeoutError",
    "SerializationError",
    "ServerIdentity",
    "ServerInfo",
    "ToolCallParams",
    "ToolCallResult",
    "ToolContent",
    "ToolExecutionError",
    "ToolNotFoundError",
    "decode_request",
    "encode_response",
]
