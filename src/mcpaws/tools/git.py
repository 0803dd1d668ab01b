"""Git tools — read-only repository inspection via the ``git`` CLI.

Both tools shell out with :func:`asyncio.create_subprocess_exec` and bound
the process by the time left on the request context.  A non-zero git
exit is reported as a text result so the client sees git's own message;
only a failure to run git at all is raised.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Any

from mcpaws.protocol.errors import InvalidParamsError, ToolExecutionError
from mcpaws.protocol.models import ToolCallResult
from mcpaws.server.context import RequestContext
from mcpaws.server.registry import InputSchema, Property, Tool

logger = logging.getLogger(__name__)

DEFAULT_LOG_COUNT = 3
MAX_LOG_COUNT = 50

CLEAN_STATUS_TEXT = "Working directory is clean - no changes to commit."
EMPTY_LOG_TEXT = "there are no logs"


class GitRunner:
    """Runs git subcommands in a fixed working directory."""

    def __init__(self, workdir: Path | None = None, executable: str = "git") -> None:
        self._workdir = workdir
        self._executable = executable

    async def run(self, tool_name: str, args: list[str], ctx: RequestContext) -> ToolCallResult | str:
        """Run ``git <args>``; return stdout, or an error result on non-zero exit."""
        logger.debug("%s: git %s (cwd=%s)", tool_name, " ".join(args), self._workdir or ".")
        try:
            proc = await asyncio.create_subprocess_exec(
                self._executable,
                *args,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                cwd=self._workdir,
            )
        except OSError as exc:
            raise ToolExecutionError(tool_name, str(exc)) from exc

        try:
            stdout, stderr = await asyncio.wait_for(proc.communicate(), timeout=ctx.remaining())
        except (TimeoutError, asyncio.CancelledError):
            proc.kill()
            await proc.wait()
            raise

        if proc.returncode:
            text = stderr.decode(errors="replace") if stderr else ""
            return ToolCallResult.from_text(f"Error: {text}")
        return stdout.decode(errors="replace") if stdout else ""


class GitStatusTool:
    """``git_status`` — current branch and working tree changes."""

    name = "git_status"

    def __init__(self, runner: GitRunner) -> None:
        self._runner = runner

    async def __call__(self, ctx: RequestContext, arguments: Any) -> ToolCallResult:
        output = await self._runner.run(self.name, ["status", "--porcelain=v1", "--branch"], ctx)
        if isinstance(output, ToolCallResult):
            return output
        return ToolCallResult.from_text(output or CLEAN_STATUS_TEXT)

    def descriptor(self) -> Tool:
        return Tool(
            name=self.name,
            description="show current git status",
            input_schema=InputSchema(),
            invoke=self,
        )


class GitLogTool:
    """``git_log`` — the most recent commits."""

    name = "git_log"

    def __init__(self, runner: GitRunner) -> None:
        self._runner = runner

    async def __call__(self, ctx: RequestContext, arguments: Any) -> ToolCallResult:
        count = parse_log_count(arguments)
        output = await self._runner.run(self.name, ["log", "-n", str(count)], ctx)
        if isinstance(output, ToolCallResult):
            return output
        return ToolCallResult.from_text(output or EMPTY_LOG_TEXT)

    def descriptor(self) -> Tool:
        return Tool(
            name=self.name,
            description="Shows recent git commits with messages, authors, and dates",
            input_schema=InputSchema(
                properties={
                    "count": Property(
                        type="integer",
                        description=f"number of logs to show (default is {DEFAULT_LOG_COUNT})",
                        default=DEFAULT_LOG_COUNT,
                    ),
                },
            ),
            invoke=self,
        )


def parse_log_count(arguments: Any) -> int:
    """Read ``count`` from *arguments*, clamped to ``1..MAX_LOG_COUNT``.

    Missing arguments or a non-positive count fall back to the default.
    """
    if arguments is None:
        return DEFAULT_LOG_COUNT
    if not isinstance(arguments, dict):
        raise InvalidParamsError(f"arguments must be an object, got {type(arguments).__name__}")

    count = arguments.get("count")
    if count is None:
        return DEFAULT_LOG_COUNT
    if isinstance(count, bool) or not isinstance(count, int):
        raise InvalidParamsError(f"count must be an integer, got {count!r}")

    if count <= 0:
        return DEFAULT_LOG_COUNT
    return min(count, MAX_LOG_COUNT)


def git_tools(workdir: Path | None = None) -> list[Tool]:
    """Build descriptors for every git tool, sharing one runner."""
    runner = GitRunner(workdir)
    return [GitStatusTool(runner).descriptor(), GitLogTool(runner).descriptor()]
