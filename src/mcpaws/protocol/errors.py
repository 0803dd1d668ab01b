"""JSON-RPC error types for the protocol layer.

Every exception here carries the JSON-RPC ``code`` it is reported under, so
the server loop can convert any of them into an error response without a
lookup table.  Handlers may raise :class:`ProtocolError` directly to choose
their own code.
"""

PARSE_ERROR = -32700
METHOD_NOT_FOUND = -32601
INTERNAL_ERROR = -32603

FALLBACK_MESSAGE = "Something went terribly wrong"


class ProtocolError(Exception):
    """Base error for all protocol-layer failures."""

    code: int = INTERNAL_ERROR

    def __init__(self, message: str = "", *, code: int | None = None) -> None:
        if code is not None:
            self.code = code
        self.message = message or FALLBACK_MESSAGE
        super().__init__(self.message)


class ParseError(ProtocolError):
    """An input line is not a decodable JSON-RPC request."""

    code = PARSE_ERROR

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__("Parse error")


class MethodNotFoundError(ProtocolError):
    """No handler is registered for the requested method."""

    code = METHOD_NOT_FOUND

    def __init__(self, method: str) -> None:
        self.method = method
        super().__init__("Method not found.")


class InvalidParamsError(ProtocolError):
    """Request params do not have the shape a handler expects.

    Reported under the internal-error code; built-in handlers do not
    override the default.
    """

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"invalid params: {detail}")


class ToolNotFoundError(ProtocolError):
    """Requested tool does not exist in the registry."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown tool {name}")


class ToolExecutionError(ProtocolError):
    """A tool body failed to run."""

    def __init__(self, name: str, detail: str = "") -> None:
        self.name = name
        self.detail = detail
        super().__init__(f"Tool execution failed: {name}" + (f": {detail}" if detail else ""))


class RequestTimeoutError(ProtocolError):
    """A handler did not finish before the request deadline."""

    def __init__(self, timeout: float) -> None:
        self.timeout = timeout
        super().__init__(f"Request timed out after {timeout}s")


class SerializationError(ProtocolError):
    """A handler result could not be encoded as JSON."""

    code = PARSE_ERROR

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__("Response marshaling failed.")
