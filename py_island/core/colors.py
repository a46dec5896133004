"""
Cell colour model.

Colours are RGB triples of floats in [0, 1]. Dry land fades from dark green
at the waterline to white at the peak; land below the waterline that has not
flooded yet shades from olive to red; flooded land shades from teal to deep
blue with depth. Open ocean is plain blue.
"""

import math
from typing import Optional, Tuple

import numpy as np

from ..errors import InvalidBlendError
from .cells import Cell
from .terrain import Terrain

Color = Tuple[float, float, float]

OCEAN = (0.0, 0.0, 1.0)
MAX_NO_FLOOD = (1.0, 1.0, 1.0)
MIN_NO_FLOOD = (0.0, 0.5, 0.0)
MIN_TO_FLOOD = (0.25, 0.5, 0.0)
MAX_TO_FLOOD = (1.0, 0.0, 0.0)
MIN_FLOODED = (0.0, 0.35, 0.5)
MAX_FLOODED = (0.0, 0.0, 1.0)


def mix(a: Color, b: Color, factor: float) -> Color:
    """
    Blend two colours.

    Args:
        a: Colour returned at factor 1
        b: Colour returned at factor 0
        factor: Blend weight of a

    Raises:
        InvalidBlendError: If factor is outside [0, 1]
    """
    if factor > 1.0 or factor < 0.0:
        raise InvalidBlendError(f"Mix not between 0.0 and 1.0: {factor}")
    return tuple(ca * factor + cb * (1 - factor) for ca, cb in zip(a, b))


def _depth_factor(depth: float, max_height: float) -> float:
    ratio = depth / max_height
    if ratio < 0:
        raise InvalidBlendError(f"Negative depth ratio: {ratio}")
    return min(math.sqrt(ratio), 1.0)


def cell_color(cell: Cell, water_height: float, max_height: float) -> Color:
    """Colour of a cell for the given water height and island peak height."""
    if cell.is_ocean():
        return OCEAN

    if cell.is_flooded:
        return mix(MAX_FLOODED, MIN_FLOODED, _depth_factor(water_height - cell.height, max_height))

    if cell.height - water_height > 0:
        return mix(MAX_NO_FLOOD, MIN_NO_FLOOD, (cell.height - water_height) / max_height)

    return mix(MAX_TO_FLOOD, MIN_TO_FLOOD, _depth_factor(water_height - cell.height, max_height))


def terrain_image(terrain: Terrain, water_height: float,
                  max_height: Optional[float] = None) -> np.ndarray:
    """
    Render the terrain to an RGB array.

    Args:
        terrain: Terrain to render
        water_height: Current water level
        max_height: Peak height for colour scaling, defaults to terrain.max_height

    Returns:
        Float array of shape (terrain.height, terrain.width, 3)
    """
    if max_height is None:
        max_height = terrain.max_height
    image = np.zeros((terrain.height, terrain.width, 3), dtype=np.float64)
    for cell in terrain:
        image[cell.y, cell.x] = cell_color(cell, water_height, max_height)
    return image
