"""Application configuration."""
import logging
from pathlib import Path
from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Get the project root directory (3 levels up from this file: backend/promptdesk/core/config.py)
PROJECT_ROOT = Path(__file__).parent.parent.parent.parent
ENV_FILE = PROJECT_ROOT / ".env"

DEFAULT_CORS_ORIGINS = ["tauri://localhost", "http://tauri.localhost", "http://localhost:1420"]


class Settings(BaseSettings):
    """Application settings."""

    # Application
    APP_NAME: str = "PromptDesk"
    DEBUG: bool = False
    HOST: str = "127.0.0.1"  # Loopback only: the desktop shell is the sole caller
    PORT: int = 1421

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_DIR: Path = PROJECT_ROOT / "logs"

    # CORS - stored as string in env, converted to list
    CORS_ORIGINS: str = ",".join(DEFAULT_CORS_ORIGINS)

    @property
    def cors_origins_list(self) -> List[str]:
        """Get CORS origins as a list."""
        origins = [origin.strip() for origin in self.CORS_ORIGINS.split(',') if origin.strip()]
        return origins if origins else list(DEFAULT_CORS_ORIGINS)

    # Outbound HTTP (shared connection pool)
    HTTP_TIMEOUT: float = 60.0  # seconds
    HTTP_FOLLOW_REDIRECTS: bool = True

    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE) if ENV_FILE.exists() else ".env",
        case_sensitive=True,
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore extra fields from .env that aren't in this model
    )

    @field_validator('LOG_LEVEL')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level name."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f'LOG_LEVEL must be a logging level name, got {v!r}')
        return level

    @field_validator('HTTP_TIMEOUT')
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Validate HTTP timeout."""
        if v <= 0:
            raise ValueError('HTTP_TIMEOUT must be positive')
        return v

    @field_validator('PORT')
    @classmethod
    def validate_port(cls, v: int) -> int:
        if not 0 < v < 65536:
            raise ValueError('PORT must be between 1 and 65535')
        return v


settings = Settings()
