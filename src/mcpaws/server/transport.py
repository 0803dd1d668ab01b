"""Server transports — newline-delimited JSON over a byte stream.

Each transport satisfies the :class:`ServerTransport` protocol, providing
``read_line``, ``write_line``, and ``close`` methods.
"""

from __future__ import annotations

import asyncio
import sys
from typing import TYPE_CHECKING, Protocol, TextIO, runtime_checkable

if TYPE_CHECKING:
    from types import TracebackType

# Long tool arguments can exceed asyncio's 64 KiB default line limit.
_READ_LIMIT = 16 * 1024 * 1024


@runtime_checkable
class ServerTransport(Protocol):
    """Abstract line transport used by the server loop."""

    async def read_line(self) -> str | None: ...
    async def write_line(self, line: str) -> None: ...
    async def close(self) -> None: ...


class StreamTransport:
    """Reads lines from an :class:`asyncio.StreamReader`, writes to a text sink.

    ``read_line`` returns ``None`` once the input is exhausted; the
    trailing newline is stripped from every line it returns.
    """

    def __init__(self, reader: asyncio.StreamReader, output: TextIO) -> None:
        self._reader = reader
        self._output = output

    async def __aenter__(self) -> StreamTransport:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    async def read_line(self) -> str | None:
        """Read one line, or ``None`` at end of input.

        Raises:
            ValueError: If the line is longer than the reader's limit.  The
                whole line is consumed first, so the next call starts at
                the following line.
        """
        try:
            raw = await self._reader.readuntil(b"\n")
        except asyncio.IncompleteReadError as exc:
            # Final line without a trailing newline.
            raw = exc.partial
        except asyncio.LimitOverrunError as exc:
            await self._skip_rest_of_line(exc.consumed)
            raise ValueError("Line exceeds the read limit") from exc
        if not raw:
            return None
        return raw.decode("utf-8", errors="replace").rstrip("\r\n")

    async def _skip_rest_of_line(self, consumed: int) -> None:
        while True:
            await self._reader.readexactly(consumed)
            try:
                await self._reader.readuntil(b"\n")
                return
            except asyncio.IncompleteReadError:
                return
            except asyncio.LimitOverrunError as exc:
                consumed = exc.consumed

    async def write_line(self, line: str) -> None:
        """Write *line* plus a newline and flush."""
        self._output.write(line + "\n")
        self._output.flush()

    async def close(self) -> None:
        """Nothing to release; the caller owns both streams."""


class StdioTransport(StreamTransport):
    """Speaks the protocol on the process's own stdin and stdout."""

    def __init__(self, reader: asyncio.StreamReader, output: TextIO | None = None) -> None:
        super().__init__(reader, output or sys.stdout)

    @classmethod
    async def connect(cls) -> StdioTransport:
        """Attach an asyncio reader to ``sys.stdin``."""
        loop = asyncio.get_running_loop()
        reader = asyncio.StreamReader(limit=_READ_LIMIT)
        protocol = asyncio.StreamReaderProtocol(reader)
        await loop.connect_read_pipe(lambda: protocol, sys.stdin)
        return cls(reader)
