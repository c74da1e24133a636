import logging
from fastapi import APIRouter, WebSocket, WebSocketDisconnect, status

from busbooking.api.v1.observers import WebSocketObserver
from busbooking.api.v1.schemas import ReservationIn, ReservationOut
from busbooking.core import ConflictError
from busbooking.deps import BookingDep
from busbooking.services import total_price

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/routes/{route_id}/reservations",
    response_model=ReservationOut,
    status_code=status.HTTP_201_CREATED,
)
async def create_reservation(route_id: int, payload: ReservationIn, booking: BookingDep):
    """Reserve seats on a route"""
    outcome = await booking.reserve(route_id, payload.count)
    if not outcome.ok:
        raise ConflictError(
            "Not enough seats available",
            details={
                "route_id": outcome.route_id,
                "requested": outcome.requested,
                "available": outcome.available,
            }
        )
    
    return ReservationOut(
        route_id=outcome.route_id,
        count=outcome.count,
        available_seats=outcome.available,
        total_price=total_price(outcome.route, outcome.count)
    )


@router.websocket("/ws/bookings")
async def booking_events(websocket: WebSocket):
    """Stream every booking made in the system to this client.

    A ``subscribed`` message is sent once the observer is registered; after
    that each booking arrives as a ``booking_made`` message.
    """
    registry = websocket.app.state.registry
    await websocket.accept()
    observer = WebSocketObserver(websocket)
    registry.subscribe(observer)
    try:
        await websocket.send_json({"event": "subscribed"})
        # Client messages are ignored; the loop only waits for disconnect.
        while True:
            await websocket.receive_text()
    except WebSocketDisconnect:
        logger.debug("Booking subscriber %r disconnected", observer)
    finally:
        registry.unsubscribe(observer)
