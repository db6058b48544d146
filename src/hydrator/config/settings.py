"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for the engine.

Usage:
    from hydrator.config import EngineSettings, get_settings

    # Load from environment variables (HYDRATOR_*)
    settings = get_settings()

    # Or override with explicit values
    settings = EngineSettings(date_display_format="%d.%m.%Y")
"""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class EngineSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for the marshalling engine.

    Attributes:
        date_display_format: strftime format dates are shown in after hydration.
        date_payload_format: strftime format dates are transmitted in.
        entries_key: Key holding collection elements in service-info wrapped values.
        log_level: Minimum level of the stderr sink installed by configure_logging.

    Environment Variables:
        HYDRATOR_DATE_DISPLAY_FORMAT
        HYDRATOR_DATE_PAYLOAD_FORMAT
        HYDRATOR_ENTRIES_KEY
        HYDRATOR_LOG_LEVEL
    """

    model_config = SettingsConfigDict(
        env_prefix="HYDRATOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    date_display_format: str = "%m/%d/%Y"
    date_payload_format: str = "%Y-%m-%d"
    entries_key: str = "entries"
    log_level: str = "WARNING"


@lru_cache(maxsize=1)
def get_settings() -> EngineSettings:
    """Process-wide settings, read from the environment once.

    Call ``get_settings.cache_clear()`` to pick up changed environment variables.
    """
    return EngineSettings()
