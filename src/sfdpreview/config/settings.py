"""Configuration settings for sfdpreview."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class LogLevel(str, Enum):
    """Log levels accepted on the command line."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class SceneConfig(BaseModel):
    """Configuration for scene building.

    Sizes are given in surface pixels and converted to font units with the
    per-render scale factor, so strokes and markers keep the same apparent
    size at every zoom level.
    """

    surface_width: float = Field(
        default=400.0,
        gt=0.0,
        description="Width of the drawing surface in pixels",
    )
    surface_height: float = Field(
        default=400.0,
        gt=0.0,
        description="Height of the drawing surface in pixels",
    )
    margin_rate: float = Field(
        default=0.2,
        ge=0.0,
        le=1.0,
        description="Margin added on every side, relative to the larger box dimension",
    )
    marker_size: float = Field(
        default=3.0,
        gt=0.0,
        description="Radius of point markers in pixels",
    )
    epsilon: float = Field(
        default=0.01,
        ge=0.0,
        description="Tolerance under which a control point coincides with its endpoint",
    )
    layer: str = Field(
        default="Fore",
        description="Name of the layer section holding the outline",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: LogLevel = Field(
        default=LogLevel.WARNING,
        description="Console log level",
    )
    file_log_level: LogLevel = Field(
        default=LogLevel.DEBUG,
        description="File log level (more verbose)",
    )


class PreviewSettings(BaseModel):
    """Main application settings."""

    scene: SceneConfig = Field(default_factory=SceneConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
