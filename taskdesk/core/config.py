"""
Application Configuration - Environment-driven settings loaded once at startup
"""

from functools import lru_cache
from typing import List
import logging
import os

from dotenv import load_dotenv

# Load variables from a local .env file if present (development convenience)
load_dotenv()

logger = logging.getLogger(__name__)

# Fallback signing key used when SECRET_KEY is not provided
DEFAULT_SECRET_KEY = "taskdesk-dev-secret-change-me"


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """
    Process-wide configuration.

    Values are read from the environment when the object is constructed,
    so tests can build their own instance after adjusting os.environ.
    """

    def __init__(self):
        # Application
        self.APP_NAME: str = os.getenv("APP_NAME", "TaskDesk API")
        self.APP_VERSION: str = os.getenv("APP_VERSION", "1.0.0")
        self.ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
        self.DEBUG: bool = _env_bool("DEBUG")
        self.HOST: str = os.getenv("HOST", "0.0.0.0")
        self.PORT: int = int(os.getenv("PORT", "5000"))

        # Database
        self.DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./taskdesk.db")
        self.DB_POOL_SIZE: int = int(os.getenv("DB_POOL_SIZE", "5"))
        self.DB_MAX_OVERFLOW: int = int(os.getenv("DB_MAX_OVERFLOW", "10"))
        self.DB_POOL_TIMEOUT: int = int(os.getenv("DB_POOL_TIMEOUT", "30"))

        # Security
        self.SECRET_KEY: str = os.getenv("SECRET_KEY") or DEFAULT_SECRET_KEY
        self.ALGORITHM: str = os.getenv("ALGORITHM", "HS256")
        self.ACCESS_TOKEN_EXPIRE_MINUTES: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "1440"))  # 24 hours
        self.BCRYPT_ROUNDS: int = int(os.getenv("BCRYPT_ROUNDS", "10"))

        # CORS - comma separated list of allowed origins
        self.CORS_ORIGINS: List[str] = [
            origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()
        ]

    @property
    def uses_default_secret(self) -> bool:
        return self.SECRET_KEY == DEFAULT_SECRET_KEY


@lru_cache()
def get_settings() -> Settings:
    """Return the cached settings instance (FastAPI dependency)."""
    return Settings()


settings = get_settings()


def is_production(config: Settings = None) -> bool:
    config = config or settings
    return config.ENVIRONMENT.lower() == "production"


def validate_config(config: Settings = None) -> None:
    """
    Validate settings before the application starts serving requests.

    Raises:
        ValueError: If a setting is out of range or unsafe for production
    """
    config = config or settings

    if not config.DATABASE_URL:
        raise ValueError("DATABASE_URL must be set")
    if not 4 <= config.BCRYPT_ROUNDS <= 31:
        raise ValueError("BCRYPT_ROUNDS must be between 4 and 31")
    if config.ACCESS_TOKEN_EXPIRE_MINUTES <= 0:
        raise ValueError("ACCESS_TOKEN_EXPIRE_MINUTES must be positive")

    if config.uses_default_secret:
        if is_production(config):
            raise ValueError("SECRET_KEY must be set in production")
        logger.warning("⚠️  SECRET_KEY not set - using the built-in development key")
