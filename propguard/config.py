"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Settings loaded from PROPGUARD_* environment variables."""

    # Logging
    DEBUG: bool = False
    LOG_LEVEL: str = "info"

    # Default messages
    DEFAULT_SUBJECT_LABEL: str = "Property"
    CACHE_DEFAULT_MESSAGE: bool = False

    # Diagnostics
    VALUE_ENCODING: str = "utf-8"

    model_config = {"env_prefix": "PROPGUARD_", "env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
