from typing import Any, Dict, List, Optional

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from busbooking.models import Route


class RouteRepository:
    """Route queries and writes bound to a single session"""
    
    def __init__(self, session: AsyncSession):
        self.session = session
    
    async def get(self, route_id: int) -> Optional[Route]:
        """Get route by ID"""
        return await self.session.get(Route, route_id)
    
    async def list_ordered(self) -> List[Route]:
        """All routes in insertion (primary key) order"""
        result = await self.session.execute(select(Route).order_by(Route.id))
        return list(result.scalars().all())
    
    async def count(self) -> int:
        result = await self.session.execute(select(func.count()).select_from(Route))
        return result.scalar() or 0
    
    async def create(self, *, obj_in: Dict[str, Any]) -> Route:
        """Insert a route row"""
        route = Route(**obj_in)
        self.session.add(route)
        await self.session.flush()
        return route
    
    async def set_available_seats(self, route_id: int, available_seats: int) -> Optional[Route]:
        """Overwrite the seat count; returns None when the route does not exist"""
        route = await self.get(route_id)
        if not route:
            return None
        
        route.available_seats = available_seats
        await self.session.flush()
        return route
