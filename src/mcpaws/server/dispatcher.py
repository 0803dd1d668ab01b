"""MethodDispatcher — maps JSON-RPC method names to handlers."""

from __future__ import annotations

import logging

from mcpaws.server.handler import Handler

logger = logging.getLogger(__name__)


class MethodDispatcher:
    """Maintains a method-name to handler map.

    Resolution never raises and never calls the handler; the server loop
    invokes what :meth:`resolve` returns and encodes its failures.

    Usage::

        dispatcher = MethodDispatcher()
        dispatcher.register("ping", ping)

        handler = dispatcher.resolve("ping")   # None when unknown
    """

    def __init__(self) -> None:
        self._handlers: dict[str, Handler] = {}

    def __contains__(self, method: object) -> bool:
        return method in self._handlers

    def register(self, method: str, handler: Handler) -> None:
        """Insert *handler* for *method*, replacing any existing one."""
        if method in self._handlers:
            logger.debug("Replacing handler for %s", method)
        self._handlers[method] = handler

    def resolve(self, method: str) -> Handler | None:
        return self._handlers.get(method)

    def methods(self) -> list[str]:
        """Return the registered method names in registration order."""
        return list(self._handlers)
