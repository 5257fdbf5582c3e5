"""Configuration settings for osmgeo."""

import math
from pathlib import Path

from pydantic import BaseModel, Field

from osmgeo.geo.projection import RawMercator


class ProjectionConfig(BaseModel):
    """Configuration for the planar projection used by planar geometry.

    The default scale maps the whole Mercator world onto a 512 unit square,
    matching zoom level 1 of a 256px tile pyramid.
    """

    scale: float = Field(
        default=512 / math.pi,
        gt=0.0,
        description="Projection scale factor (planar units per radian)",
    )
    translate_x: float = Field(
        default=0.0,
        description="Horizontal translation applied after scaling",
    )
    translate_y: float = Field(
        default=0.0,
        description="Vertical translation applied after scaling",
    )

    def to_projection(self) -> RawMercator:
        """Build the projection described by this configuration.

        Returns:
            RawMercator with configured scale and translation
        """
        return RawMercator(scale=self.scale, translate=(self.translate_x, self.translate_y))


class JoinConfig(BaseModel):
    """Configuration for way joining."""

    reverse_tagged_members: bool = Field(
        default=True,
        description="Reverse direction-dependent tags of members traversed backwards",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class OsmGeoSettings(BaseModel):
    """Main application settings."""

    projection: ProjectionConfig = Field(default_factory=ProjectionConfig)
    join: JoinConfig = Field(default_factory=JoinConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> OsmGeoSettings:
    """Get default application settings."""
    return OsmGeoSettings()
