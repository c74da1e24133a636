from .exceptions import (
    BaseError,
    NotFoundError,
    ValidationError,
    ConflictError,
    StorageError,
)
from .config import Settings, get_settings
from .logging import configure_logging

__all__ = [
    # Exceptions
    "BaseError",
    "NotFoundError",
    "ValidationError",
    "ConflictError",
    "StorageError",
    
    # Config
    "Settings",
    "get_settings",
    "configure_logging",
]
