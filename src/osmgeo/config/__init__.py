"""Configuration management for osmgeo.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- ProjectionConfig: Planar projection scale and translation
- JoinConfig: Way joining behaviour
- LoggingConfig: Logging settings
- OsmGeoSettings: Main application settings
"""

from osmgeo.config.settings import (
    JoinConfig,
    LoggingConfig,
    OsmGeoSettings,
    ProjectionConfig,
    get_default_settings,
)

__all__ = [
    "JoinConfig",
    "LoggingConfig",
    "OsmGeoSettings",
    "ProjectionConfig",
    "get_default_settings",
]
