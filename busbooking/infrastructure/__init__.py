from .database import create_engine, create_session_factory
from .route_store import RouteStore

__all__ = [
    "create_engine",
    "create_session_factory",
    "RouteStore",
]
