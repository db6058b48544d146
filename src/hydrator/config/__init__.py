"""Configuration module using Pydantic Settings.

Provides typed engine configuration with environment variable support.

Usage:
    from hydrator.config import EngineSettings, get_settings

    settings = get_settings()
    custom = EngineSettings(date_payload_format="%Y%m%d")
"""

from hydrator.config.settings import EngineSettings, get_settings

__all__ = [
    "EngineSettings",
    "get_settings",
]
