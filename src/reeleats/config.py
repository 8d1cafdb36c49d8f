"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    environment: str = _ENVIRONMENT
    seed_demo_catalog: bool = True
    owner_name: str = "Julz"
    origin_latitude: float = -37.8136
    origin_longitude: float = 144.9631
    search_latency_seconds: float = 1.0
    share_detection_latency_seconds: float = 2.0
    search_cache_ttl_seconds: int = 300
    debug: bool = False

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
