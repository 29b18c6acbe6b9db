"""Utility functions for sfdpreview.

This module provides utility functions including:

- Logging setup and configuration
- Render statistics tracking
"""

from sfdpreview.utils.logging import (
    RenderLogger,
    RenderStats,
    configure_logging,
)

__all__ = [
    "RenderLogger",
    "RenderStats",
    "configure_logging",
]
