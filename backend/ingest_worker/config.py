"""Application configuration using Pydantic settings."""
import logging
from pydantic_settings import BaseSettings
from typing import List, Optional


class Settings(BaseSettings):
    """Worker settings loaded from environment variables."""

    # Legacy ingestion endpoint (POST /)
    api_endpoint: Optional[str] = None

    # System of record (POST /v1)
    database_url: Optional[str] = None
    database_auth_token: Optional[str] = None

    # Tinybird analytics backend (POST /v1)
    tinybird_token: Optional[str] = None
    tinybird_url: str = "https://api.tinybird.co"
    tinybird_datasource: str = "web_vitals__v0"

    environment: str = "development"
    log_level: Optional[str] = None  # e.g. "warning"; defaults by environment

    # CORS
    allowed_origins: str = "*"

    forward_timeout_seconds: float = 10.0

    @property
    def resolved_log_level(self) -> int:
        """Numeric log level: LOG_LEVEL if set, else DEBUG in development and INFO elsewhere."""
        if self.log_level:
            level = logging.getLevelName(self.log_level.upper())
            if isinstance(level, int):
                return level
        return logging.DEBUG if self.environment == "development" else logging.INFO

    @property
    def cors_origins(self) -> List[str]:
        """Parse CORS origins from comma-separated string."""
        return [origin.strip() for origin in self.allowed_origins.split(",")]

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()


def get_settings() -> Settings:
    """Dependency returning the deployment settings."""
    return settings
