"""MCPServer — the protocol loop tying transport, dispatcher, and registry together.

Requests are handled strictly one at a time in arrival order, so responses
leave in the order their requests arrived.  Every request carrying an id
gets exactly one response line; notifications never get one.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from mcpaws.protocol.codec import decode_request, encode_response
from mcpaws.protocol.errors import (
    FALLBACK_MESSAGE,
    INTERNAL_ERROR,
    MethodNotFoundError,
    ParseError,
    ProtocolError,
    RequestTimeoutError,
    SerializationError,
)
from mcpaws.protocol.models import (
    DEFAULT_PROTOCOL_VERSION,
    Capabilities,
    JsonRpcRequest,
    JsonRpcResponse,
    ServerIdentity,
    ServerInfo,
)
from mcpaws.server.context import DEFAULT_REQUEST_TIMEOUT, RequestContext
from mcpaws.server.dispatcher import MethodDispatcher
from mcpaws.server.handler import Handler, call_handler
from mcpaws.server.handlers import (
    METHOD_CALL,
    METHOD_INITIALIZE,
    METHOD_TOOLS_CALL,
    METHOD_TOOLS_LIST,
    BuiltinHandlers,
)
from mcpaws.server.registry import Tool, ToolRegistry
from mcpaws.server.transport import ServerTransport
from mcpaws.utils.telemetry import (
    ATTR_ERROR_CODE,
    ATTR_METHOD,
    ATTR_NOTIFICATION,
    ATTR_REQUEST_ID,
    get_tracer,
)

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)


class MCPServer:
    """Serves tools to an MCP client over a line transport.

    Usage::

        server = MCPServer(name="git-mcp", version="0.1.0")
        server.add_tool(Tool(name="git_status", invoke=git_status))

        async with StdioTransport(...) as transport:
            await server.serve(transport)

    Handlers and tools are registered during setup; once :meth:`serve`
    is running, registration raises :class:`RuntimeError`.
    """

    def __init__(
        self,
        *,
        name: str,
        version: str,
        protocol_version: str = DEFAULT_PROTOCOL_VERSION,
        capabilities: Capabilities | None = None,
        request_timeout: float = DEFAULT_REQUEST_TIMEOUT,
        dispatch_notifications: bool = False,
    ) -> None:
        self._identity = ServerIdentity(
            protocol_version=protocol_version,
            capabilities=capabilities or Capabilities(),
            server_info=ServerInfo(name=name, version=version),
        )
        self._request_timeout = request_timeout
        self._dispatch_notifications = dispatch_notifications
        self._serving = False

        self._registry = ToolRegistry()
        self._dispatcher = MethodDispatcher()

        builtins = BuiltinHandlers(self._identity, self._registry)
        self._dispatcher.register(METHOD_INITIALIZE, builtins.initialize)
        self._dispatcher.register(METHOD_TOOLS_LIST, builtins.list_tools)
        self._dispatcher.register(METHOD_TOOLS_CALL, builtins.call_tool)
        self._dispatcher.register(METHOD_CALL, builtins.call_tool)

    @property
    def identity(self) -> ServerIdentity:
        return self._identity

    @property
    def registry(self) -> ToolRegistry:
        return self._registry

    @property
    def dispatcher(self) -> MethodDispatcher:
        return self._dispatcher

    @property
    def request_timeout(self) -> float:
        return self._request_timeout

    @property
    def serving(self) -> bool:
        return self._serving

    # ------------------------------------------------------------------
    # Setup
    # ------------------------------------------------------------------

    def add_handler(self, method: str, handler: Handler) -> None:
        """Register *handler* for *method* (built-ins may be overwritten)."""
        self._check_setup()
        self._dispatcher.register(method, handler)

    def add_tool(self, tool: Tool) -> None:
        """Register *tool*, replacing any tool with the same name."""
        self._check_setup()
        self._registry.register(tool)

    def _check_setup(self) -> None:
        if self._serving:
            msg = "Cannot register handlers or tools while the server is running"
            raise RuntimeError(msg)

    # ------------------------------------------------------------------
    # Protocol loop
    # ------------------------------------------------------------------

    async def serve(self, transport: ServerTransport) -> None:
        """Process lines from *transport* until its input ends."""
        self._serving = True
        logger.info(
            "Serving %s %s (protocol %s)",
            self._identity.server_info.name,
            self._identity.server_info.version,
            self._identity.protocol_version,
        )
        try:
            while True:
                try:
                    line = await transport.read_line()
                except ValueError as exc:
                    # Oversized line; the transport has already skipped past it.
                    logger.warning("Unreadable input line: %s", exc)
                    await self._send(transport, self._error_response(None, ParseError(str(exc))))
                    continue

                if line is None:
                    logger.info("Input closed; stopping")
                    return

                response_line = await self.handle_line(line)
                if response_line is not None:
                    await self._send(transport, response_line)
        finally:
            self._serving = False

    async def handle_line(self, line: str) -> str | None:
        """Turn one input line into one encoded response line, or ``None``.

        ``None`` is returned for blank lines and notifications.
        """
        if not line.strip():
            return None

        try:
            request = decode_request(line)
        except ParseError as exc:
            logger.warning("Discarding malformed request: %s", exc.detail)
            return self._error_response(None, exc)

        response = await self.process_request(request)
        if response is None:
            return None
        return self._encode(response)

    async def process_request(self, request: JsonRpcRequest) -> JsonRpcResponse | None:
        """Dispatch a decoded request and build its response.

        Returns ``None`` for notifications, whatever their outcome.
        """
        with _tracer.start_as_current_span("mcpaws.request") as span:
            span.set_attribute(ATTR_METHOD, request.method)
            span.set_attribute(ATTR_NOTIFICATION, request.is_notification)

            if request.is_notification:
                if self._dispatch_notifications:
                    await self._run_notification(request)
                else:
                    logger.debug("Ignoring notification %s", request.method)
                return None

            span.set_attribute(ATTR_REQUEST_ID, str(request.id))
            try:
                result = await self._dispatch(request)
            except ProtocolError as exc:
                span.set_attribute(ATTR_ERROR_CODE, exc.code)
                logger.warning("%s (id=%r) failed: %s", request.method, request.id, exc.message)
                return JsonRpcResponse.failure(request.id, exc.code, exc.message)
            except Exception as exc:
                span.set_attribute(ATTR_ERROR_CODE, INTERNAL_ERROR)
                logger.warning(
                    "%s (id=%r) raised %s", request.method, request.id, type(exc).__name__, exc_info=True
                )
                return JsonRpcResponse.failure(request.id, INTERNAL_ERROR, str(exc) or FALLBACK_MESSAGE)

            logger.debug("%s (id=%r) succeeded", request.method, request.id)
            return JsonRpcResponse.success(request.id, result)

    async def _dispatch(self, request: JsonRpcRequest) -> Any:
        handler = self._dispatcher.resolve(request.method)
        if handler is None:
            raise MethodNotFoundError(request.method)

        ctx = RequestContext(
            method=request.method,
            request_id=request.id,
            timeout=self._request_timeout,
        )
        scope = asyncio.timeout(ctx.timeout)
        try:
            async with scope:
                return await call_handler(handler, ctx, request.params)
        except TimeoutError as exc:
            # A handler's own TimeoutError stays an ordinary internal error.
            if scope.expired():
                raise RequestTimeoutError(ctx.timeout) from exc
            raise

    async def _run_notification(self, request: JsonRpcRequest) -> None:
        try:
            await self._dispatch(request)
        except Exception:
            logger.warning("Notification %s failed", request.method, exc_info=True)

    # ------------------------------------------------------------------
    # Encoding
    # ------------------------------------------------------------------

    def _encode(self, response: JsonRpcResponse) -> str:
        try:
            return encode_response(response)
        except SerializationError as exc:
            logger.warning("Cannot encode result for id=%r: %s", response.id, exc.detail)
            try:
                return self._error_response(response.id, exc)
            except SerializationError:
                # The id itself cannot be encoded.
                return self._error_response(None, exc)

    @staticmethod
    def _error_response(request_id: Any, exc: ProtocolError) -> str:
        return encode_response(JsonRpcResponse.failure(request_id, exc.code, exc.message))

    @staticmethod
    async def _send(transport: ServerTransport, line: str) -> None:
        try:
            await transport.write_line(line)
        except OSError:
            logger.exception("Failed to write response")
