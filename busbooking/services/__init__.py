from .observer_registry import (
    BookingObserver,
    CallbackObserver,
    ConsoleObserver,
    DeliveryFailure,
    ObserverRegistry,
)
from .catalog_service import CatalogService
from .booking_service import (
    BookingService,
    InsufficientSeats,
    Reserved,
    ReservationOutcome,
    total_price,
)

__all__ = [
    "BookingObserver",
    "CallbackObserver",
    "ConsoleObserver",
    "DeliveryFailure",
    "ObserverRegistry",
    "CatalogService",
    "BookingService",
    "InsufficientSeats",
    "Reserved",
    "ReservationOutcome",
    "total_price",
]
