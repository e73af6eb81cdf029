"""Per-request cancellation context handed to service methods."""

from __future__ import annotations

import time
from typing import Any, Optional

from starlette.requests import Request


class Context:
    """Cancellation and deadline carrier for one request.

    A service method receives it by declaring a parameter annotated with
    ``Context``. The adapter only forwards the deadline; enforcing it is up
    to the method.
    """

    def __init__(self, request: Request, deadline: Optional[float] = None):
        self._request = request
        self._deadline = deadline
        self._cancelled = False

    @classmethod
    def from_request(cls, request: Request, timeout: Optional[float] = None) -> Context:
        """Create a context whose deadline is ``timeout`` seconds from now."""
        deadline = time.monotonic() + timeout if timeout else None
        return cls(request, deadline)

    @property
    def deadline(self) -> Optional[float]:
        """Deadline on the ``time.monotonic()`` clock, or None."""
        return self._deadline

    def time_remaining(self) -> Optional[float]:
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - time.monotonic())

    @property
    def expired(self) -> bool:
        return self._deadline is not None and time.monotonic() >= self._deadline

    @property
    def cancelled(self) -> bool:
        return self._cancelled or self.expired

    def cancel(self) -> None:
        self._cancelled = True

    async def is_disconnected(self) -> bool:
        """Poll the client connection; a disconnect cancels the context."""
        if await self._request.is_disconnected():
            self._cancelled = True
        return self.cancelled

    @property
    def state(self) -> Any:
        """Request-scoped values shared with middleware."""
        return self._request.state
