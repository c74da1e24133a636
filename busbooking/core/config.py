import os
from typing import List
from functools import lru_cache


DEFAULT_DB_DSN = "sqlite+aiosqlite:///./bus_booking.db"


class Settings:
    """Application settings read from the environment"""
    
    # Database
    DB_DSN: str = os.getenv("DB_DSN", DEFAULT_DB_DSN)
    DB_POOL_SIZE: int = int(os.getenv("DB_POOL_SIZE", "5"))
    DB_ECHO: bool = os.getenv("DB_ECHO", "false").lower() == "true"
    SEED_ON_STARTUP: bool = os.getenv("SEED_ON_STARTUP", "true").lower() == "true"
    
    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    
    # CORS
    CORS_ALLOW_ORIGINS: List[str] = []
    CORS_ALLOW_CREDENTIALS: bool = True
    
    def __init__(self):
        self._validate()
        self._parse_cors_origins()
    
    def _validate(self):
        """Validate required settings"""
        if not self.DB_DSN:
            raise ValueError("DB_DSN environment variable must not be empty")
        if self.DB_POOL_SIZE < 1:
            raise ValueError("DB_POOL_SIZE must be a positive integer")
    
    def _parse_cors_origins(self):
        """Parse CORS origins from environment"""
        raw_origins = os.getenv("CORS_ALLOW_ORIGINS", "*")
        
        if raw_origins.strip() == "*":
            self.CORS_ALLOW_ORIGINS = ["*"]
            self.CORS_ALLOW_CREDENTIALS = False  # wildcard forbids credentials
        else:
            self.CORS_ALLOW_ORIGINS = [o.strip() for o in raw_origins.split(",") if o.strip()]
            self.CORS_ALLOW_CREDENTIALS = True

    @property
    def is_sqlite(self) -> bool:
        return self.DB_DSN.startswith("sqlite")


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
