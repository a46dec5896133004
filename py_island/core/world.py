"""
Tick-driven island world.

The world owns one terrain and a water level. Every tick_interval ticks the
water rises by one foot and the terrain is flooded at the new level.
"""

from typing import Optional

import numpy as np
import structlog

from ..config.terrain_config import TerrainConfig
from ..errors import ConfigurationError
from .alea_prng import AleaPRNG
from .colors import terrain_image
from .terrain import Terrain, generate_terrain

logger = structlog.get_logger()


class IslandWorld:
    """Rising-water simulation over a single terrain."""

    def __init__(self, terrain: Terrain, tick_interval: int = 1):
        """
        Initialize the world.

        Args:
            terrain: Terrain to flood; the world becomes its only mutator
            tick_interval: Ticks between each one-foot rise of the water

        Raises:
            ConfigurationError: If tick_interval is below 1
        """
        if tick_interval < 1:
            raise ConfigurationError(f"tick_interval must be at least 1, got {tick_interval}")
        self.terrain = terrain
        self.tick_interval = tick_interval
        self.water_height = 0
        self.tick = 0

    @classmethod
    def generate(cls, config: TerrainConfig, prng: Optional[AleaPRNG] = None,
                 tick_interval: int = 1) -> "IslandWorld":
        """Create a world on a freshly generated terrain."""
        return cls(generate_terrain(config, prng), tick_interval=tick_interval)

    def on_tick(self) -> int:
        """
        Advance the world by one tick.

        Returns:
            Number of cells flooded during this tick
        """
        self.tick = (self.tick + 1) % self.tick_interval
        if self.tick != 0:
            return 0

        self.water_height += 1
        flooded = self.terrain.flood(self.water_height)
        logger.debug("Water rose", water_height=self.water_height, newly_flooded=flooded)
        return flooded

    def regenerate(self, config: TerrainConfig, prng: Optional[AleaPRNG] = None) -> None:
        """Replace the terrain with a new one and reset the water level."""
        self.terrain = generate_terrain(config, prng)
        self.water_height = 0
        self.tick = 0
        logger.info("World regenerated", generator=config.generator.value)

    def image(self) -> np.ndarray:
        """RGB image of the terrain at the current water level."""
        return terrain_image(self.terrain, self.water_height)
