from .route_repository import RouteRepository

__all__ = [
    "RouteRepository",
]
