"""
Core settings and environment variables for the Agri-Waste Match service.
Uses pydantic-settings for type-safe environment variable loading.
"""

from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    Create a .env file in the root directory to configure these.
    """

    # Application
    APP_NAME: str = "Agri-Waste Match API"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Server (PORT matches the legacy Node server)
    HOST: str = "0.0.0.0"
    PORT: int = 3001

    # CORS - the API is open to any origin
    CORS_ORIGINS: str = "*"

    # MongoDB
    MONGODB_URI: Optional[str] = None
    MONGODB_DB_NAME: str = "agriwaste"  # Used when the URI does not name a database

    # In-memory store for local development without MongoDB
    USE_MOCK_DB: bool = False

    # Matching
    MATCH_MAX_DISTANCE_METERS: float = 30000.0

    # Client components (report form / organization query)
    REACT_APP_API_HOST: str = "https://localhost:3001"
    CLIENT_TIMEOUT_SECONDS: Optional[float] = None

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "allow"

    @property
    def cors_origins_list(self) -> list[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


# Global settings instance
settings = Settings()
