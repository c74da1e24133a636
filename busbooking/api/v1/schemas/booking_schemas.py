from decimal import Decimal
from typing import Literal
from pydantic import BaseModel

from .route_schemas import RouteOut


class ReservationIn(BaseModel):
    """Schema for reserving seats; the count is range-checked by the booking service"""
    count: int


class ReservationOut(BaseModel):
    """Schema for a committed reservation"""
    route_id: int
    count: int
    available_seats: int
    total_price: Decimal


class BookingEventOut(BaseModel):
    """Message pushed to booking subscribers"""
    event: Literal["booking_made"] = "booking_made"
    count: int
    route: RouteOut
