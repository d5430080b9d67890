from __future__ import annotations

from dataclasses import dataclass, field
from typing import Awaitable, Callable

from starlette.requests import Request

from .errors import OperationCancelled


@dataclass
class CancellationToken:
    """Cooperative cancellation signal passed from the route to the handler.

    The dispatch layer only carries the token; handlers decide whether to
    observe it. ``probe`` is consulted by ``poll`` and reports whether the
    caller has gone away (for HTTP, the client disconnecting).
    """

    probe: Callable[[], Awaitable[bool]] | None = None
    _cancelled: bool = field(default=False, init=False, repr=False)

    @classmethod
    def none(cls) -> "CancellationToken":
        return cls()

    @classmethod
    def from_request(cls, request: Request) -> "CancellationToken":
        return cls(probe=request.is_disconnected)

    @property
    def is_cancellation_requested(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True

    async def poll(self) -> bool:
        if not self._cancelled and self.probe is not None and await self.probe():
            self._cancelled = True
        return self._cancelled

    def raise_if_cancellation_requested(self) -> None:
        if self._cancelled:
            raise OperationCancelled(code="OPERATION_CANCELLED", message="the operation was cancelled")
