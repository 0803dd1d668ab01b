"""Per-request context handed to every handler and tool."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any

DEFAULT_REQUEST_TIMEOUT = 30.0


@dataclass(frozen=True)
class RequestContext:
    """Deadline-bearing context scoped to a single request.

    The server enforces the deadline with :func:`asyncio.timeout`, so a
    handler is cancelled at its next ``await`` once time runs out.  Work
    that leaves the event loop (subprocesses, threads) should read
    :meth:`remaining` and pass it on as its own timeout.
    """

    method: str
    request_id: Any = None
    timeout: float = DEFAULT_REQUEST_TIMEOUT
    started_at: float = field(default_factory=time.monotonic)

    @property
    def deadline(self) -> float:
        """Deadline on the :func:`time.monotonic` clock."""
        return self.started_at + self.timeout

    def remaining(self) -> float:
        """Seconds left before the deadline (never negative)."""
        return max(0.0, self.deadline - time.monotonic())

    @property
    def expired(self) -> bool:
        return self.remaining() <= 0.0
