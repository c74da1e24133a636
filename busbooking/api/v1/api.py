from fastapi import APIRouter

from busbooking.api.v1.endpoints import routes, bookings


# Create main API router
api_v1_router = APIRouter()

# Route catalog (read side)
api_v1_router.include_router(
    routes.router,
    prefix="/routes",
    tags=["routes"]
)

# Reservations and booking event stream
api_v1_router.include_router(
    bookings.router,
    tags=["bookings"]
)
