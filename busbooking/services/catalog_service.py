from typing import List

from busbooking.core import NotFoundError
from busbooking.infrastructure import RouteStore
from busbooking.models import Route


class CatalogService:
    """Read-side queries over the route store.

    Every call re-reads the store so seat counts are never stale beyond the
    last committed reservation. Sorting is stable, so ties keep the store's
    insertion order.
    """

    def __init__(self, store: RouteStore):
        self.store = store

    async def list_source_cities(self) -> List[str]:
        """Distinct source cities, ascending"""
        routes = await self.store.get_all()
        return sorted({route.source_city for route in routes})

    async def list_destinations(self, source: str) -> List[str]:
        """Distinct destinations reachable from *source*, ascending"""
        routes = await self.store.get_all()
        return sorted({route.destination_city for route in routes if route.source_city == source})

    async def find_routes(self, source: str, destination: str) -> List[Route]:
        """Routes for one city pair, by departure time"""
        routes = await self.store.get_all()
        matches = [
            route for route in routes
            if route.source_city == source and route.destination_city == destination
        ]
        return sorted(matches, key=lambda route: route.departure_time)

    async def list_all_sorted(self) -> List[Route]:
        """Overview listing: source city, then departure time"""
        routes = await self.store.get_all()
        return sorted(routes, key=lambda route: (route.source_city, route.departure_time))

    async def get_route(self, route_id: int) -> Route:
        route = await self.store.get_by_id(route_id)
        if route is None:
            raise NotFoundError("Route", route_id)
        return route
