"""
Core settings and environment variables for UrbanAware Risk Hub.
Uses pydantic-settings for type-safe environment variable loading.
"""

from pydantic_settings import BaseSettings
from typing import List, Optional


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    Create a .env file in the root directory to configure these.
    """

    # Application
    APP_NAME: str = "UrbanAware Risk Hub"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # CORS - Frontend URLs allowed to access this API
    # Include common dev ports (3000, 5173). In production set this to your exact origin(s).
    CORS_ORIGINS: str = "http://localhost:3000,http://127.0.0.1:3000,http://localhost:5173,http://127.0.0.1:5173"

    # Firebase/Firestore
    FIREBASE_PROJECT_ID: Optional[str] = None
    FIREBASE_CREDENTIALS_PATH: Optional[str] = None  # Path to service account JSON

    # Mock DB mode for local development without Firebase credentials
    USE_MOCK_DB: bool = False
    MOCK_DB_PATH: str = "./mock_db.json"

    # Collection holding one document per (district, date)
    DISTRICTS_COLLECTION: str = "october_data"

    # Trend synthesis
    # - TREND_JITTER_BOUND: exclusive upper bound of the per-week jitter
    # - TREND_RANDOM_SEED: fix the jitter sequence (demos, screenshots)
    TREND_JITTER_BOUND: float = 5.0
    TREND_RANDOM_SEED: Optional[int] = None

    # Static contextual data (media, AQI table, help directory)
    MEDIA_ROOT: str = "./media"
    MEDIA_URL_PREFIX: str = "/media"
    AQI_DATA_PATH: str = "./data/aqi_data.json"
    HELP_DATA_PATH: str = "./data/district_help.json"

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "allow"

    @property
    def cors_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


# Global settings instance
settings = Settings()
