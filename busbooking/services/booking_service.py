"""Seat reservation against the shared route inventory.

A reservation is read-validate-write under the route's lock: the current seat
count is always re-read from the store, so a stale ``Route`` snapshot held by
a session can never authorise an overdraw. Observers are told about a booking
only after the new count is committed, and before ``reserve`` returns.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Union

from busbooking.core import NotFoundError, ValidationError
from busbooking.infrastructure import RouteStore
from busbooking.locks import RouteLocks
from busbooking.models import Route
from .observer_registry import ObserverRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Reserved:
    """Seats were committed; ``available`` is the new count."""
    route: Route
    count: int
    available: int

    ok = True

    @property
    def route_id(self) -> int:
        return self.route.id


@dataclass(frozen=True)
class InsufficientSeats:
    """Rejected without any change; ``available`` is the untouched count."""
    route_id: int
    requested: int
    available: int

    ok = False


ReservationOutcome = Union[Reserved, InsufficientSeats]


def _validate_count(count: int, *, minimum: int) -> None:
    if isinstance(count, bool) or not isinstance(count, int):
        raise ValidationError("Seat count must be an integer", field="count")
    if count < minimum:
        raise ValidationError(f"Seat count must be at least {minimum}", field="count")


def total_price(route: Route, count: int) -> Decimal:
    """Price of *count* seats on *route*."""
    _validate_count(count, minimum=0)
    return Decimal(route.price) * count


class BookingService:
    """Atomic seat reservation plus booking notifications."""

    def __init__(
        self,
        store: RouteStore,
        registry: ObserverRegistry,
        locks: Optional[RouteLocks] = None,
    ):
        self.store = store
        self.registry = registry
        self.locks = locks or RouteLocks()

    async def reserve(self, route: Union[int, Route], count: int) -> ReservationOutcome:
        """Reserve *count* seats on *route* (an id or a previously fetched snapshot).

        Raises ``ValidationError`` for a count below 1 before touching the store,
        ``NotFoundError`` for an unknown route and ``StorageError`` when the
        store fails; in the last case no observer is notified.
        """
        _validate_count(count, minimum=1)
        snapshot = route if isinstance(route, Route) else None
        route_id = snapshot.id if snapshot is not None else route
        if isinstance(route_id, bool) or not isinstance(route_id, int):
            raise ValidationError("Route id must be an integer", field="route_id")

        async with self.locks.hold(route_id):
            current = await self.store.get_by_id(route_id)
            if current is None:
                raise NotFoundError("Route", route_id)

            available = current.available_seats
            if count > available:
                logger.info(
                    "Rejected booking of %d seat(s) on route %s: %d available",
                    count, route_id, available,
                )
                return InsufficientSeats(route_id=route_id, requested=count, available=available)

            new_available = available - count
            await self.store.update_available_seats(route_id, new_available)

            current.available_seats = new_available
            if snapshot is not None:
                snapshot.available_seats = new_available

        logger.info(
            "Booked %d seat(s) on route %s: %d -> %d available",
            count, route_id, available, new_available,
        )
        # The lock is released first so an observer may query or book this route.
        await self.registry.notify(current, count)
        return Reserved(route=current, count=count, available=new_available)

    def total_price(self, route: Route, count: int) -> Decimal:
        return total_price(route, count)
