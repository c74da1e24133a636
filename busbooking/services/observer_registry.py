from __future__ import annotations

import inspect
import logging
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, List, Optional, TextIO, Union

from busbooking.models import Route

logger = logging.getLogger(__name__)


class BookingObserver(ABC):
    """Receives every successful reservation, whichever session made it."""

    @abstractmethod
    async def on_booking_made(self, route: Route, count: int) -> None:
        """Called after *count* seats on *route* were committed.

        ``route.available_seats`` already holds the post-booking value.
        """


class CallbackObserver(BookingObserver):
    """Adapts a plain or async callable taking ``(route, count)``."""

    def __init__(self, callback: Callable[[Route, int], Union[Awaitable[Any], Any]]):
        self._callback = callback

    async def on_booking_made(self, route: Route, count: int) -> None:
        result = self._callback(route, count)
        if inspect.isawaitable(result):
            await result

    def __repr__(self):
        return f"CallbackObserver({self._callback!r})"


class ConsoleObserver(BookingObserver):
    """Writes a one-line summary per booking to a text stream."""

    def __init__(self, label: str = "console", stream: Optional[TextIO] = None):
        self.label = label
        self._stream = stream

    async def on_booking_made(self, route: Route, count: int) -> None:
        stream = self._stream or sys.stdout
        stream.write(
            f"[{self.label}] {count} seat(s) booked on {route.source_city} -> "
            f"{route.destination_city} {route.departure_time:%H:%M}-{route.arrival_time:%H:%M} "
            f"| {route.available_seats} seats available\n"
        )
        stream.flush()

    def __repr__(self):
        return f"ConsoleObserver({self.label!r})"


@dataclass(frozen=True)
class DeliveryFailure:
    observer: BookingObserver
    error: Exception


class ObserverRegistry:
    """Synchronous fan-out of booking events, in subscription order."""

    def __init__(self):
        self._observers: List[BookingObserver] = []

    def subscribe(self, observer: BookingObserver) -> None:
        # Duplicates are not filtered: subscribing twice means two deliveries.
        self._observers.append(observer)
        logger.debug("Subscribed %r (%d observers)", observer, len(self._observers))

    def unsubscribe(self, observer: BookingObserver) -> None:
        """Remove *observer*; unknown observers are ignored."""
        try:
            self._observers.remove(observer)
        except ValueError:
            return
        logger.debug("Unsubscribed %r (%d observers)", observer, len(self._observers))

    async def notify(self, route: Route, count: int) -> List[DeliveryFailure]:
        """Deliver ``(route, count)`` to every current subscriber.

        A failing observer is logged and recorded; delivery continues with the
        next one. Observers removed while the fan-out is running are skipped.
        """
        failures: List[DeliveryFailure] = []
        for observer in list(self._observers):
            if observer not in self._observers:
                continue
            try:
                await observer.on_booking_made(route, count)
            except Exception as exc:
                logger.exception(
                    "Observer %r failed on booking of %d seat(s) for route %s",
                    observer, count, route.id,
                )
                failures.append(DeliveryFailure(observer, exc))
        return failures

    def __len__(self) -> int:
        return len(self._observers)

    def __contains__(self, observer: object) -> bool:
        return observer in self._observers
