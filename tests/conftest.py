from datetime import time
from decimal import Decimal

import pytest
import pytest_asyncio

from busbooking.core import Settings
from busbooking.infrastructure import RouteStore, create_engine
from busbooking.models import Route
from busbooking.services import BookingService, CatalogService, ObserverRegistry


# Route ids follow the starter catalog order.
BUCHAREST_BRASOV_MORNING = 1
BUCHAREST_BRASOV_AFTERNOON = 2
BUCHAREST_CLUJ = 3


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at a fresh SQLite file"""
    settings = Settings()
    settings.DB_DSN = f"sqlite+aiosqlite:///{tmp_path / 'bus_booking.db'}"
    settings.DB_ECHO = False
    settings.LOG_LEVEL = "DEBUG"
    return settings


@pytest_asyncio.fixture
async def engine(settings):
    engine = create_engine(settings)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def store(engine):
    """Store seeded with the starter catalog"""
    store = RouteStore(engine)
    await store.initialize()
    return store


@pytest.fixture
def make_store(engine):
    """Factory for a store seeded with custom rows"""
    async def _make(seed):
        store = RouteStore(engine, seed=seed)
        await store.initialize()
        return store
    return _make


@pytest.fixture
def registry():
    return ObserverRegistry()


@pytest.fixture
def catalog(store):
    return CatalogService(store)


@pytest.fixture
def booking(store, registry):
    return BookingService(store, registry)


@pytest.fixture
def sample_route():
    """Transient route, never persisted"""
    return Route(
        id=1,
        source_city="Bucharest",
        destination_city="Brașov",
        departure_time=time(8, 0),
        arrival_time=time(10, 30),
        total_seats=40,
        available_seats=38,
        price=Decimal("50.00"),
    )


class RecordingObserver:
    """Collects deliveries; plugged in through CallbackObserver"""

    def __init__(self, name="observer"):
        self.name = name
        self.calls = []

    def __call__(self, route, count):
        self.calls.append((route.id, count, route.available_seats))
