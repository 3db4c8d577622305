# src/superfactory/config/settings.py
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class FactorySettings(BaseSettings):
    """
    Runtime switches for a SuperFactory.
    Read from SUPERFACTORY_* environment variables (or a local .env).
    """

    # Field injection after construction. Off → inject() is a no-op.
    injection_enabled: bool = True
    # Raise AmbiguousFactoryError instead of taking the first matching factory.
    strict_overloads: bool = False
    log_registrations: bool = True

    model_config = SettingsConfigDict(
        env_prefix="SUPERFACTORY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> FactorySettings:
    """Process-wide settings, loaded once."""
    return FactorySettings()
