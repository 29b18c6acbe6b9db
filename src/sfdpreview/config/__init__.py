"""Configuration management for sfdpreview.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- SceneConfig: Scene building settings (surface size, margin, markers)
- LoggingConfig: Logging settings (LogLevel choices)
- PreviewSettings: Main application settings
"""

from sfdpreview.config.settings import (
    LogLevel,
    LoggingConfig,
    PreviewSettings,
    SceneConfig,
)

__all__ = [
    "LogLevel",
    "LoggingConfig",
    "PreviewSettings",
    "SceneConfig",
]
