"""Shared fixtures: a test server and an in-memory line transport."""

from __future__ import annotations

import asyncio
import io
import json
from collections.abc import Awaitable, Callable
from typing import Any

import pytest

from mcpaws.server.registry import InputSchema, Property, Tool
from mcpaws.server.server import MCPServer
from mcpaws.server.transport import StreamTransport

RunLines = Callable[..., Awaitable[list[dict[str, Any]]]]


def make_tool(name: str = "echo", result: Any = "ok", **kwargs: Any) -> Tool:
    """Build a tool whose callable records the arguments it receives."""
    calls: list[Any] = []

    async def invoke(ctx: Any, arguments: Any) -> Any:
        calls.append(arguments)
        return result

    tool = Tool(
        name=name,
        description=kwargs.pop("description", f"{name} tool"),
        input_schema=kwargs.pop(
            "input_schema",
            InputSchema(
                properties={"text": Property(type="string", description="what to echo")},
                required=["text"],
            ),
        ),
        invoke=invoke,
        **kwargs,
    )
    invoke.calls = calls  # type: ignore[attr-defined]
    return tool


@pytest.fixture
def server() -> MCPServer:
    return MCPServer(name="TestServer", version="1.0.0", protocol_version="2025-06-18")


@pytest.fixture
def run_lines() -> RunLines:
    """Feed raw lines through ``server.serve`` and return the decoded output."""

    async def _run(server: MCPServer, *lines: str) -> list[dict[str, Any]]:
        reader = asyncio.StreamReader()
        for line in lines:
            reader.feed_data((line + "\n").encode())
        reader.feed_eof()
        output = io.StringIO()
        await server.serve(StreamTransport(reader, output))
        return [json.loads(out) for out in output.getvalue().splitlines()]

    return _run


@pytest.fixture
def tool_factory() -> Callable[..., Tool]:
    return make_tool
