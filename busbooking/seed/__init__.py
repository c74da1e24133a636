from .starter_routes import STARTER_ROUTES, route_row

__all__ = ["STARTER_ROUTES", "route_row"]
