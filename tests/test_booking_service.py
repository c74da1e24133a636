import asyncio
from decimal import Decimal
from unittest.mock import AsyncMock, patch

import pytest

from busbooking.core import NotFoundError, StorageError, ValidationError
from busbooking.services import (
    BookingService,
    CallbackObserver,
    InsufficientSeats,
    ObserverRegistry,
    Reserved,
    total_price,
)
from tests.conftest import BUCHAREST_BRASOV_AFTERNOON, BUCHAREST_BRASOV_MORNING, RecordingObserver

R0 = BUCHAREST_BRASOV_MORNING


async def seats(store, route_id):
    return (await store.get_by_id(route_id)).available_seats


class TestReserve:

    @pytest.mark.asyncio
    async def test_reservation_scenario_drains_route(self, booking, store):
        first = await booking.reserve(R0, 5)
        assert isinstance(first, Reserved)
        assert first.ok
        assert first.available == 35

        too_many = await booking.reserve(R0, 40)
        assert too_many == InsufficientSeats(route_id=R0, requested=40, available=35)
        assert not too_many.ok

        rest = await booking.reserve(R0, 35)
        assert rest.available == 0

        empty = await booking.reserve(R0, 1)
        assert empty == InsufficientSeats(route_id=R0, requested=1, available=0)
        assert await seats(store, R0) == 0

    @pytest.mark.asyncio
    async def test_sequential_reservations_add_up(self, booking, store):
        await booking.reserve(R0, 7)
        second = await booking.reserve(R0, 13)

        assert second.ok
        assert await seats(store, R0) == 40 - 20

    @pytest.mark.asyncio
    async def test_rejection_changes_nothing(self, booking, store, registry):
        recorder = RecordingObserver()
        registry.subscribe(CallbackObserver(recorder))

        outcome = await booking.reserve(R0, 41)

        assert outcome.available == 40
        assert await seats(store, R0) == 40
        assert recorder.calls == []

    @pytest.mark.asyncio
    async def test_success_returns_updated_route(self, booking):
        outcome = await booking.reserve(R0, 3)

        assert outcome.route_id == R0
        assert outcome.count == 3
        assert outcome.route.available_seats == 37

    @pytest.mark.asyncio
    async def test_unknown_route_raises_not_found(self, booking):
        with pytest.raises(NotFoundError):
            await booking.reserve(999, 1)

    @pytest.mark.asyncio
    async def test_route_id_beyond_integer_column_raises_not_found(self, booking):
        with pytest.raises(NotFoundError):
            await booking.reserve(2 ** 70, 1)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("count", [0, -3, 1.5, True, "2"])
    async def test_invalid_count_rejected_before_store_access(self, count):
        store = AsyncMock()
        service = BookingService(store, ObserverRegistry())

        with pytest.raises(ValidationError) as exc_info:
            await service.reserve(R0, count)

        assert exc_info.value.details == {"field": "count"}
        store.get_by_id.assert_not_called()
        store.update_available_seats.assert_not_called()


class TestStaleSnapshots:

    @pytest.mark.asyncio
    async def test_snapshot_is_revalidated_against_store(self, booking, catalog):
        snapshot = await catalog.get_route(R0)
        await booking.reserve(R0, 30)

        outcome = await booking.reserve(snapshot, 20)

        assert outcome == InsufficientSeats(route_id=R0, requested=20, available=10)

    @pytest.mark.asyncio
    async def test_snapshot_updated_after_success(self, booking, catalog):
        snapshot = await catalog.get_route(R0)
        await booking.reserve(R0, 30)

        outcome = await booking.reserve(snapshot, 10)

        assert outcome.available == 0
        assert snapshot.available_seats == 0


class TestConcurrentReservations:

    @pytest.mark.asyncio
    async def test_whole_pool_requests_only_one_wins(self, booking, store):
        outcomes = await asyncio.gather(*(booking.reserve(R0, 40) for _ in range(5)))

        assert sum(o.ok for o in outcomes) == 1
        assert [o.available for o in outcomes if not o.ok] == [0, 0, 0, 0]
        assert await seats(store, R0) == 0

    @pytest.mark.asyncio
    async def test_partial_requests_exhaust_pool_exactly(self, booking, store):
        outcomes = await asyncio.gather(*(booking.reserve(R0, 7) for _ in range(10)))

        successes = [o for o in outcomes if o.ok]
        assert len(successes) == 5
        assert sorted(o.available for o in successes) == [5, 12, 19, 26, 33]
        assert all(o.available == 5 for o in outcomes if not o.ok)
        assert await seats(store, R0) == 5

    @pytest.mark.asyncio
    async def test_different_routes_do_not_interfere(self, booking, store):
        first, second = await asyncio.gather(
            booking.reserve(BUCHAREST_BRASOV_MORNING, 40),
            booking.reserve(BUCHAREST_BRASOV_AFTERNOON, 40),
        )

        assert first.ok and second.ok
        assert await seats(store, BUCHAREST_BRASOV_MORNING) == 0
        assert await seats(store, BUCHAREST_BRASOV_AFTERNOON) == 0


class TestStorageFailure:

    @pytest.mark.asyncio
    async def test_failed_write_aborts_without_notification(self, booking, store, registry, catalog):
        recorder = RecordingObserver()
        registry.subscribe(CallbackObserver(recorder))
        snapshot = await catalog.get_route(R0)

        with patch.object(
            store,
            "update_available_seats",
            side_effect=StorageError("update_available_seats", "disk unavailable"),
        ):
            with pytest.raises(StorageError):
                await booking.reserve(snapshot, 5)

        assert recorder.calls == []
        assert snapshot.available_seats == 40
        assert await seats(store, R0) == 40

    @pytest.mark.asyncio
    async def test_lock_released_after_failure(self, booking, store):
        with patch.object(store, "get_by_id", side_effect=StorageError("get_by_id", "boom")):
            with pytest.raises(StorageError):
                await booking.reserve(R0, 1)

        assert not booking.locks.locked(R0)
        assert (await booking.reserve(R0, 1)).ok


class TestNotification:

    @pytest.mark.asyncio
    async def test_observers_notified_before_reserve_returns(self, booking, registry):
        recorder = RecordingObserver()
        registry.subscribe(CallbackObserver(recorder))

        await booking.reserve(R0, 4)

        assert recorder.calls == [(R0, 4, 36)]

    @pytest.mark.asyncio
    async def test_failing_observer_does_not_fail_reservation(self, booking, registry, store):
        def explode(route, count):
            raise RuntimeError("window closed")

        recorder = RecordingObserver()
        registry.subscribe(CallbackObserver(explode))
        registry.subscribe(CallbackObserver(recorder))

        outcome = await booking.reserve(R0, 2)

        assert outcome.ok
        assert recorder.calls == [(R0, 2, 38)]
        assert await seats(store, R0) == 38

    @pytest.mark.asyncio
    async def test_observer_may_book_the_same_route(self, booking, registry, store):
        follow_ups = []
        started = []

        async def book_one_more(route, count):
            if started:
                return
            started.append(route.id)
            follow_ups.append(await booking.reserve(route.id, 1))

        registry.subscribe(CallbackObserver(book_one_more))

        outcome = await asyncio.wait_for(booking.reserve(R0, 10), timeout=5)

        assert outcome.available == 30
        assert follow_ups[0].available == 29
        assert await seats(store, R0) == 29

    @pytest.mark.asyncio
    async def test_fan_out_follows_subscriptions(self, booking, registry):
        first, second, third = RecordingObserver("first"), RecordingObserver("second"), RecordingObserver("third")
        observers = [CallbackObserver(recorder) for recorder in (first, second, third)]
        for observer in observers:
            registry.subscribe(observer)

        await booking.reserve(R0, 2)
        registry.unsubscribe(observers[1])
        await booking.reserve(R0, 1)

        assert first.calls == [(R0, 2, 38), (R0, 1, 37)]
        assert second.calls == [(R0, 2, 38)]
        assert third.calls == [(R0, 2, 38), (R0, 1, 37)]


class TestTotalPrice:

    def test_total_price(self, sample_route):
        assert total_price(sample_route, 5) == Decimal("250.00")
        assert total_price(sample_route, 0) == Decimal("0")

    def test_total_price_negative_count(self, sample_route):
        with pytest.raises(ValidationError):
            total_price(sample_route, -1)

    def test_service_total_price(self, booking, sample_route):
        assert booking.total_price(sample_route, 3) == Decimal("150.00")
