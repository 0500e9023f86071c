"""
Summary: Ports defining the network transport used by the dispatcher.
Why: Decouple dispatch from concrete HTTP stacks so tests and swaps stay simple.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from ..domain.prepared_request import PreparedRequest


@dataclass(frozen=True, slots=True)
class TransportResponse:
    """Raw outcome of one network exchange.

    Attributes:
        body: Response payload, or ``None`` when nothing was received.
        status: HTTP status code, or ``None`` when no response arrived.
        error: Transport-level failure (connection error, timeout,
            cancellation). A response may still accompany it.
    """

    body: bytes | None = None
    status: int | None = None
    error: BaseException | None = None


TransportCompletion = Callable[[TransportResponse], None]


@runtime_checkable
class TransportTask(Protocol):
    """Handle for a prepared exchange; nothing is sent until ``resume``."""

    def resume(self) -> None:
        """Start the exchange."""
        ...


@runtime_checkable
class Transport(Protocol):
    """Port for performing one HTTP exchange per task."""

    def data_task(
        self,
        request: PreparedRequest,
        completion: TransportCompletion,
    ) -> TransportTask:
        """Create a task that invokes ``completion`` exactly once after ``resume``."""
        ...


__all__ = [
    "Transport",
    "TransportCompletion",
    "TransportResponse",
    "TransportTask",
]
