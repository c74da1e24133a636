from typing import List
from fastapi import APIRouter, Query

from busbooking.api.v1.schemas import RouteOut, RouteListOut
from busbooking.deps import CatalogDep


router = APIRouter()


@router.get("/", response_model=RouteListOut)
async def list_routes(catalog: CatalogDep):
    """All routes by source city, then departure time"""
    routes = await catalog.list_all_sorted()
    return RouteListOut(
        count=len(routes),
        routes=[RouteOut.model_validate(r) for r in routes]
    )


@router.get("/sources", response_model=List[str])
async def list_source_cities(catalog: CatalogDep):
    """Distinct source cities"""
    return await catalog.list_source_cities()


@router.get("/destinations", response_model=List[str])
async def list_destinations(
    catalog: CatalogDep,
    source: str = Query(..., min_length=1),
):
    """Destinations reachable from a source city"""
    return await catalog.list_destinations(source)


@router.get("/search", response_model=List[RouteOut])
async def find_routes(
    catalog: CatalogDep,
    source: str = Query(..., min_length=1),
    destination: str = Query(..., min_length=1),
):
    """Routes for one city pair, by departure time"""
    routes = await catalog.find_routes(source, destination)
    return [RouteOut.model_validate(r) for r in routes]


@router.get("/{route_id}", response_model=RouteOut)
async def get_route(route_id: int, catalog: CatalogDep):
    """Single route with its current seat count"""
    route = await catalog.get_route(route_id)
    return RouteOut.model_validate(route)
