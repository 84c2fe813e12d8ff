"""
House generation pipeline module.

Provides the explicit rebuild entry point tying layout, meshes and
furnishing together.
"""

from .house_pipeline import (
    HouseGenerator,
    HouseSettings,
    HouseBuild,
    HouseGenerationError,
)

__all__ = [
    'HouseGenerator',
    'HouseSettings',
    'HouseBuild',
    'HouseGenerationError',
]
