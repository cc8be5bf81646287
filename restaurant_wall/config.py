"""Configuration management for Restaurant Wall using Pydantic."""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "http://localhost:3000/api"


class Config(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # API Configuration
    api_url: str = Field(
        default=DEFAULT_API_URL, description="Base URL of the restaurants API"
    )

    # Local Storage Configuration
    storage_path: str = Field(
        default="restaurant_wall.db",
        description="SQLite file used as local persistent storage",
    )

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("api_url")
    @classmethod
    def _default_when_blank(cls, value: str) -> str:
        """Fall back to the local default when API_URL is set but empty."""
        value = value.strip()
        if not value:
            return DEFAULT_API_URL
        return value.rstrip("/")

    def model_post_init(self, __context) -> None:
        """Report which API the application will talk to."""
        if "api_url" not in self.model_fields_set:
            logger.debug("API_URL not set - using local default API")


# Global config instance
config: Config | None = None


def get_config() -> Config:
    """Get or create the global configuration instance."""
    global config
    if config is None:
        config = Config()
    return config


def setup_logging(cfg: Config | None = None) -> None:
    """Configure logging for the application."""
    if cfg is None:
        cfg = get_config()

    log_level = getattr(logging, cfg.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Reduce noise from external libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
