"""Configuration module for motionframe.

Provides the resolution settings model and JSON persistence for it.
"""

from .defaults import (
    ResolutionSettings,
    get_default_settings,
)
from .settings import (
    load_settings,
    save_settings,
)

__all__ = [
    "ResolutionSettings",
    "get_default_settings",
    "load_settings",
    "save_settings",
]
