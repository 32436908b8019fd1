from functools import lru_cache
from typing import List
from pydantic_settings import BaseSettings
from pydantic import field_validator


class Settings(BaseSettings):
    # API Configuration
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    ALLOWED_ORIGINS: List[str] = ["*"]

    # Directions provider
    GOOGLE_MAPS_API_KEY: str | None = None
    DIRECTIONS_SERVICE_BASE_URL: str = "https://maps.googleapis.com/maps/api/directions/json"
    WAYPOINT_LIMIT: int = 10  # Max waypoints the provider accepts per request
    REQUEST_TIMEOUT_SECONDS: float = 30.0

    # Logging
    LOG_LEVEL: str = "INFO"

    # Environment name
    ENVIRONMENT: str = "development"

    @field_validator("ALLOWED_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",")]
        elif isinstance(v, (list, str)):
            return v
        raise ValueError(v)

    @field_validator("WAYPOINT_LIMIT")
    @classmethod
    def waypoint_limit_must_be_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("WAYPOINT_LIMIT must be at least 1")
        return v

    class Config:
        case_sensitive = True
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
