"""Durable route storage.

``RouteStore`` is the only component that writes routes to the database. Each
call runs in its own session, so one store can be shared by every booking
session in the process. Routes handed out are detached snapshots: mutating
them never reaches the database.
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Iterable, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from busbooking.core import NotFoundError, StorageError
from busbooking.models import Base, Route
from busbooking.seed import STARTER_ROUTES, route_row
from busbooking.seed.starter_routes import SeedRow
from .database import create_session_factory
from .repositories import RouteRepository

logger = logging.getLogger(__name__)

# Route ids are stored as signed 64-bit integers; anything outside cannot exist.
MIN_ROUTE_ID = -(2 ** 63)
MAX_ROUTE_ID = 2 ** 63 - 1


def _storable_id(route_id: int) -> bool:
    return MIN_ROUTE_ID <= route_id <= MAX_ROUTE_ID


class RouteStore:
    """Persistence facade keyed by route id."""

    def __init__(
        self,
        engine: AsyncEngine,
        seed: Iterable[SeedRow] = STARTER_ROUTES,
    ):
        self._engine = engine
        self._session_factory = create_session_factory(engine)
        self._seed = tuple(seed)

    @asynccontextmanager
    async def _repository(self, operation: str) -> AsyncGenerator[RouteRepository, None]:
        """Open a session for *operation*; commit on success, roll back on error.

        Driver failures are re-raised as ``StorageError``. Domain errors raised
        inside the block pass through unchanged after the rollback.
        """
        try:
            async with self._session_factory() as session:
                try:
                    yield RouteRepository(session)
                    await session.commit()
                except Exception:
                    await session.rollback()
                    raise
        except (SQLAlchemyError, OSError) as exc:
            logger.error("Route store %s failed: %s", operation, exc)
            raise StorageError(operation, str(exc)) from exc

    async def initialize(self) -> int:
        """Create the schema if absent and seed an empty table.

        Returns the number of routes inserted, which is 0 for an already
        populated store.
        """
        try:
            async with self._engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except (SQLAlchemyError, OSError) as exc:
            logger.error("Route store schema creation failed: %s", exc)
            raise StorageError("initialize", str(exc)) from exc

        async with self._repository("initialize") as repo:
            existing = await repo.count()
            if existing:
                logger.info("Route store already holds %d routes; skipping seed", existing)
                return 0
            for row in self._seed:
                await repo.create(obj_in=route_row(row))

        logger.info("Seeded route store with %d routes", len(self._seed))
        return len(self._seed)

    async def get_all(self) -> List[Route]:
        async with self._repository("get_all") as repo:
            return await repo.list_ordered()

    async def get_by_id(self, route_id: int) -> Optional[Route]:
        if not _storable_id(route_id):
            return None
        async with self._repository("get_by_id") as repo:
            return await repo.get(route_id)

    async def update_available_seats(self, route_id: int, available_seats: int) -> None:
        """Unconditionally overwrite the persisted seat count.

        Range checks are the caller's job; this only refuses unknown ids.
        """
        if not _storable_id(route_id):
            raise NotFoundError("Route", route_id)
        async with self._repository("update_available_seats") as repo:
            route = await repo.set_available_seats(route_id, available_seats)
            if route is None:
                raise NotFoundError("Route", route_id)
