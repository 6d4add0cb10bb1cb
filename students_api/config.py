"""Application settings, read from environment variables and an optional .env file."""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    env: str = "local"

    # Storage
    storage_path: str = "storage/storage.db"

    # HTTP server
    host: str = "127.0.0.1"
    port: int = 8082
    api_prefix: str = ""

    @field_validator("api_prefix")
    @classmethod
    def normalize_prefix(cls, v: str) -> str:
        """Accept `api`, `/api` or `/api/` and store `/api`."""
        v = v.strip().strip("/")
        return f"/{v}" if v else ""

    # Logging
    log_level: str = "INFO"
    log_format: str = "text"


@lru_cache
def get_settings() -> Settings:
    return Settings()
