import asyncio
from typing import Dict

# ---------------------------------------------------------------------------
#  Seat-locking helper
# ---------------------------------------------------------------------------

class RouteLocks:
    """Hands out one ``asyncio.Lock`` per route id.

    Usage::
        async with locks.hold(route_id):
            # safe to read seats, validate and write back

    Locks are created lazily and kept for the life of the registry; routes are
    never deleted, so the map is bounded by the catalog size. All callers must
    share one event loop.
    """

    def __init__(self):
        self._locks: Dict[int, asyncio.Lock] = {}

    def hold(self, route_id: int) -> asyncio.Lock:
        """Return the lock guarding *route_id* (use it with ``async with``)."""
        lock = self._locks.get(route_id)
        if lock is None:
            lock = self._locks.setdefault(route_id, asyncio.Lock())
        return lock

    def locked(self, route_id: int) -> bool:
        lock = self._locks.get(route_id)
        return lock is not None and lock.locked()
