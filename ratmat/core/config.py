"""
Library configuration.

Settings are read from RATMAT_* environment variables or a local .env file.
"""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """ratmat settings"""

    model_config = SettingsConfigDict(
        env_prefix="RATMAT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Logging
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: str = "text"  # json or text
    LOG_FILE: Optional[str] = None

    # Cofactor expansion is O(n!); warn at or above this dimension
    COFACTOR_WARN_DIMENSION: int = 9


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


# Global settings instance
settings = get_settings()
