from .v1.api import api_v1_router

__all__ = ["api_v1_router"]
