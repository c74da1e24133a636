from .route_schemas import RouteOut, RouteListOut
from .booking_schemas import ReservationIn, ReservationOut, BookingEventOut

__all__ = [
    # Route schemas
    "RouteOut",
    "RouteListOut",
    
    # Booking schemas
    "ReservationIn",
    "ReservationOut",
    "BookingEventOut",
]
