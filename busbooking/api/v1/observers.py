import asyncio

from fastapi import WebSocket

from busbooking.models import Route
from busbooking.services import BookingObserver
from busbooking.api.v1.schemas import BookingEventOut, RouteOut


class WebSocketObserver(BookingObserver):
    """Pushes each booking to one connected WebSocket client as JSON.

    Bookings on different routes notify concurrently, so sends to the same
    socket are serialized; a WebSocket does not allow overlapping writes.
    """

    def __init__(self, websocket: WebSocket):
        self.websocket = websocket
        self._send_lock = asyncio.Lock()

    async def on_booking_made(self, route: Route, count: int) -> None:
        event = BookingEventOut(count=count, route=RouteOut.model_validate(route))
        async with self._send_lock:
            await self.websocket.send_json(event.model_dump(mode="json"))

    def __repr__(self):
        client = self.websocket.client
        return f"WebSocketObserver({client.host}:{client.port})" if client else "WebSocketObserver()"
