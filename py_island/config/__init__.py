"""
Configuration modules for terrain generation.
"""

from .settings import Settings, settings
from .terrain_config import GeneratorKind, TerrainConfig, build_config

__all__ = ['Settings', 'settings', 'GeneratorKind', 'TerrainConfig', 'build_config']
