from typing import Annotated
from fastapi import Depends, Request

from busbooking.services import BookingService, CatalogService


def get_catalog(request: Request) -> CatalogService:
    return request.app.state.catalog


def get_booking_service(request: Request) -> BookingService:
    return request.app.state.booking


# Type aliases for dependency injection
CatalogDep = Annotated[CatalogService, Depends(get_catalog)]
BookingDep = Annotated[BookingService, Depends(get_booking_service)]
