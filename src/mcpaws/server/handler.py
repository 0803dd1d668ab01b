"""The handler calling convention shared by methods and tools."""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from typing import Any, Union

from mcpaws.server.context import RequestContext

# (context, raw JSON params) -> result; failures are raised.
Handler = Callable[[RequestContext, Any], Union[Awaitable[Any], Any]]


async def call_handler(handler: Handler, ctx: RequestContext, params: Any) -> Any:
    """Invoke *handler*, awaiting the result when it is a coroutine."""
    result = handler(ctx, params)
    if inspect.isawaitable(result):
        result = await result
    return result
