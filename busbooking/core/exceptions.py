from typing import Any, Optional, Dict


class BaseError(Exception):
    """Base exception class for the application"""
    
    def __init__(
        self, 
        message: str = "An error occurred",
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(BaseError):
    """Exception raised when an entity is not found"""
    
    def __init__(self, entity: str, id: Any):
        super().__init__(
            message=f"{entity} with id {id} not found",
            status_code=404,
            details={"entity": entity, "id": id}
        )


class ValidationError(BaseError):
    """Exception raised for invalid arguments, before any storage access"""
    
    def __init__(self, message: str, field: Optional[str] = None):
        details = {"field": field} if field else {}
        super().__init__(
            message=message,
            status_code=400,
            details=details
        )


class ConflictError(BaseError):
    """Exception raised for conflict errors"""
    
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message=message, status_code=409, details=details)


class StorageError(BaseError):
    """Exception raised when the backing store fails.

    The driver exception is kept as ``__cause__``; the operation that failed is
    recorded so callers can decide whether to retry.
    """
    
    def __init__(self, operation: str, message: str):
        super().__init__(
            message=f"Storage error during {operation}: {message}",
            status_code=503,
            details={"operation": operation}
        )
        self.operation = operation
