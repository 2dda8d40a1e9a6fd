# storefront/core/config.py
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Centralized application settings loaded from environment.

    Every field has a development default so the API boots against a
    local SQLite file. In production override at least:
      - DATABASE_URL
      - JWT_SECRET
    """

    PROJECT_NAME: str = "Storefront API"
    API_PREFIX: str = "/api"

    # Persistence
    DATABASE_URL: str = "sqlite:///./storefront.db"
    DB_ECHO: bool = False
    # Upper bound for a single store/catalog round trip (driver timeout)
    DB_TIMEOUT_SECONDS: float = 5.0

    # JWT issued by /auth/login and /auth/register
    JWT_SECRET: str = "change-me-in-production"
    JWT_ALG: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 7  # 1 week

    # How long a cart mutation waits for the per-user lock
    CART_LOCK_TIMEOUT_SECONDS: float = 5.0

    CORS_ORIGINS: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings loader.
    Ensures we don't re-parse .env on every import / request.
    """
    return Settings()
