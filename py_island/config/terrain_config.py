"""
Terrain generation configuration.

A TerrainConfig selects one of the three height generators and carries the
parameters the generator and the cell builder need.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from ..errors import ConfigurationError

# Default grid: cells 0..64 on each axis
DEFAULT_ISLAND_SIZE = 64
DEFAULT_OCEAN_DISTANCE = 32
DEFAULT_RANDOM_MAX_HEIGHT = 64
DEFAULT_MIN_HEIGHT = -30.0
DEFAULT_NUDGE_PROBABILITY = 0.32


class GeneratorKind(str, Enum):
    """Height generation strategy."""

    MOUNTAIN = "mountain"
    RANDOM = "random"
    TERRAIN = "terrain"


class TerrainConfig(BaseModel):
    """Configuration for terrain generation."""

    model_config = ConfigDict(frozen=True)

    generator: GeneratorKind = Field(default=GeneratorKind.MOUNTAIN, description="Height generator")
    island_size: int = Field(default=DEFAULT_ISLAND_SIZE, ge=2, description="Last valid grid index")
    max_height: Optional[float] = Field(default=None, gt=0, description="Peak height in feet")
    ocean_distance: int = Field(
        default=DEFAULT_OCEAN_DISTANCE, gt=0, description="Manhattan radius where ocean starts"
    )
    min_height: Optional[float] = Field(
        default=DEFAULT_MIN_HEIGHT, description="Floor for midpoint displacement, None for no floor"
    )
    nudge_probability: float = Field(
        default=DEFAULT_NUDGE_PROBABILITY, ge=0, le=1, description="Chance of a downward nudge"
    )
    seed: Optional[str] = Field(default=None, description="PRNG seed")

    @model_validator(mode="after")
    def _check_height_range(self) -> "TerrainConfig":
        if self.min_height is not None and self.min_height >= self.height_limit:
            raise ValueError(
                f"min_height {self.min_height} must be below max_height {self.height_limit}"
            )
        return self

    @property
    def side(self) -> int:
        """Number of cells along one edge of the grid."""
        return self.island_size + 1

    @property
    def center(self) -> int:
        """Grid coordinate of the island centre on both axes."""
        return self.island_size // 2

    @property
    def height_limit(self) -> float:
        """Configured max height, or the generator's default."""
        if self.max_height is not None:
            return self.max_height
        if self.generator == GeneratorKind.RANDOM:
            return DEFAULT_RANDOM_MAX_HEIGHT
        return self.island_size // 2


def build_config(**overrides) -> TerrainConfig:
    """
    Build a TerrainConfig, reporting invalid values as ConfigurationError.

    Args:
        **overrides: TerrainConfig field values

    Returns:
        Validated TerrainConfig
    """
    try:
        return TerrainConfig(**overrides)
    except ValidationError as e:
        raise ConfigurationError(str(e)) from e
