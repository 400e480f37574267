"""
Configuration module - loads all env vars using pydantic-settings.
This is the SINGLE SOURCE OF TRUTH for all config values.
"""

from functools import lru_cache
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "BhashaConnect"

    # MongoDB (full URI wins over host/port/name)
    mongodb_uri: Optional[str] = None
    db_host: str = "localhost"
    db_port: int = 27017
    db_name: str = "bhashaconnect"

    # HTTP
    port: int = 5000
    frontend_url: str = "http://localhost:3000"
    api_prefix: str = "/api"

    # JWT Auth
    jwt_secret_key: str = "change-this-secret"
    jwt_algorithm: str = "HS256"
    jwt_expire_minutes: int = 1440

    # Listing
    max_page_limit: int = 100

    # App
    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    @property
    def mongo_url(self) -> str:
        """Construct MongoDB connection URL"""
        if self.mongodb_uri:
            return self.mongodb_uri
        return f"mongodb://{self.db_host}:{self.db_port}/{self.db_name}"

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
