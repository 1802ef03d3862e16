"""Configuration using pydantic-settings.

Settings are read from SPROUTKEYS_* environment variables or a .env file.
"""

import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Historical count: earlier seed keys were stretched with `2 ^ 16` (XOR, not a power)
LEGACY_SEED_ITERATIONS = 18
DEFAULT_SEED_ITERATIONS = 2**16


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SPROUTKEYS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ======================
    # Environment
    # ======================
    environment: str = Field(default="development", description="Runtime environment")
    debug: bool = Field(default=False, description="Enable debug logging")
    log_level: str = Field(default="INFO", description="Log level when debug is off")

    # ======================
    # Seed Stretching
    # ======================
    seed_iterations: int = Field(
        default=DEFAULT_SEED_ITERATIONS,
        ge=1,
        description="PBKDF2-HMAC-SHA256 iterations for seed-derived keys",
    )
    legacy_seed_iterations: bool = Field(
        default=False,
        description="Use the historical 18-iteration stretch for compatibility with old keys",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value}")
        return level

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    def get_seed_iterations(self) -> int:
        """Get the PBKDF2 iteration count for seed-derived keys."""
        if self.legacy_seed_iterations:
            return LEGACY_SEED_ITERATIONS
        return self.seed_iterations

    def get_safe_dict(self) -> dict:
        """Return settings as a dict suitable for logging."""
        return {
            "environment": self.environment,
            "debug": self.debug,
            "log_level": self.log_level,
            "seed_iterations": self.get_seed_iterations(),
            "legacy_seed_iterations": self.legacy_seed_iterations,
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure root logging from settings."""
    settings = settings or get_settings()
    log_level = logging.DEBUG if settings.debug else getattr(logging, settings.log_level)
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
