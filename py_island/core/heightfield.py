"""
Height field generation.

Three interchangeable strategies fill a square (size+1)x(size+1) grid of
heights, indexed [y, x]:

- mountain: height falls off linearly with Manhattan distance from the centre
- random: independent uniform integer heights
- terrain: recursive midpoint displacement seeded from the centre

Randomized strategies draw from an explicit AleaPRNG so a seed reproduces a
terrain exactly.
"""

from typing import Callable, Dict, Optional, Tuple

import numpy as np
import structlog

from ..config.terrain_config import GeneratorKind, TerrainConfig
from .alea_prng import AleaPRNG

logger = structlog.get_logger()

Point = Tuple[int, int]


def manhattan_distance(x: int, y: int, center_x: int, center_y: int) -> float:
    """Calculate the Manhattan distance between (x, y) and the centre."""
    return float(abs(x - center_x) + abs(y - center_y))


def mountain_heights(size: int, max_height: float) -> np.ndarray:
    """
    Generate a diamond-shaped mountain.

    Args:
        size: Last valid grid index
        max_height: Height at the centre

    Returns:
        Height grid where height(x, y) = max_height - |x - c| - |y - c|
    """
    center = size // 2
    ys, xs = np.indices((size + 1, size + 1))
    distance = np.abs(xs - center) + np.abs(ys - center)
    return (max_height - distance).astype(np.float64)


def random_heights(size: int, max_height: float, prng: AleaPRNG) -> np.ndarray:
    """Generate independent uniform integer heights in [0, max_height]."""
    heights = np.zeros((size + 1, size + 1), dtype=np.float64)
    top = int(max_height)
    for y in range(size + 1):
        for x in range(size + 1):
            heights[y, x] = prng.randint(0, top)
    return heights


def seed_terrain_heights(size: int, max_height: float) -> np.ndarray:
    """
    Create the starting grid for midpoint displacement.

    The centre holds max_height and the four edge midpoints hold 1; every
    other cell is 0, meaning "not yet computed".
    """
    heights = np.zeros((size + 1, size + 1), dtype=np.float64)
    center = (size + 1) // 2

    heights[center, center] = max_height
    heights[0, center] = 1
    heights[size, center] = 1
    heights[center, 0] = 1
    heights[center, size] = 1
    return heights


def _nudge(prng: AleaPRNG, area: float, down_probability: float) -> float:
    """Random displacement whose magnitude grows with the quadrant area."""
    if prng.random() <= down_probability:
        return -1 * prng.random() * area + prng.random()
    return prng.random() * area + prng.random()


def _clamp(value: float, min_height: Optional[float], max_height: float) -> float:
    value = min(max_height, value)
    if min_height is not None:
        value = max(min_height, value)
    return value


def _subdivide(
    heights: np.ndarray,
    prng: AleaPRNG,
    top_left: Point,
    top_right: Point,
    bottom_right: Point,
    bottom_left: Point,
    max_height: float,
    min_height: Optional[float],
    down_probability: float,
) -> None:
    """Fill the midpoints of one quadrant, then recurse into its four children."""
    tl_x, tl_y = top_left
    tr_x, tr_y = top_right
    br_x, br_y = bottom_right
    bl_x, bl_y = bottom_left

    if not (tr_x - tl_x > 1 and br_x - bl_x > 1 and bl_y - tl_y > 1 and br_y - tr_y > 1):
        return

    top = ((tl_x + tr_x) // 2, tl_y)
    right = (tr_x, (tl_y + bl_y) // 2)
    bottom = ((bl_x + br_x) // 2, bl_y)
    left = (tl_x, (tl_y + bl_y) // 2)
    middle = ((left[0] + right[0]) // 2, (top[1] + bottom[1]) // 2)

    area = float((tr_x - tl_x) * (bl_y - tl_y))

    tl_h = heights[tl_y, tl_x]
    tr_h = heights[tr_y, tr_x]
    br_h = heights[br_y, br_x]
    bl_h = heights[bl_y, bl_x]

    # Nudges are drawn in top, right, bottom, left, middle order
    candidates = [
        (top, _nudge(prng, area, down_probability) + (tl_h + tr_h) / 2),
        (right, _nudge(prng, area, down_probability) + (tr_h + br_h) / 2),
        (bottom, _nudge(prng, area, down_probability) + (bl_h + br_h) / 2),
        (left, _nudge(prng, area, down_probability) + (tl_h + bl_h) / 2),
        (middle, _nudge(prng, area, down_probability) + (tl_h + tr_h + br_h + bl_h) / 4),
    ]

    for (x, y), value in candidates:
        # Edge midpoints are shared between neighbouring quadrants
        if heights[y, x] == 0:
            heights[y, x] = _clamp(value, min_height, max_height)

    args = (max_height, min_height, down_probability)
    _subdivide(heights, prng, top_left, top, middle, left, *args)
    _subdivide(heights, prng, top, top_right, right, middle, *args)
    _subdivide(heights, prng, middle, right, bottom_right, bottom, *args)
    _subdivide(heights, prng, left, middle, bottom, bottom_left, *args)


def terrain_heights(
    size: int,
    max_height: float,
    prng: AleaPRNG,
    min_height: Optional[float] = -30.0,
    down_probability: float = 0.32,
) -> np.ndarray:
    """
    Generate heights by recursive midpoint displacement.

    Args:
        size: Last valid grid index
        max_height: Centre height and upper clamp
        prng: Random source for the nudges
        min_height: Lower clamp, or None to clamp only from above
        down_probability: Chance that a nudge pushes the midpoint down

    Returns:
        Height grid of shape (size + 1, size + 1)
    """
    heights = seed_terrain_heights(size, max_height)
    center = (size + 1) // 2
    last = size

    args = (max_height, min_height, down_probability)
    _subdivide(heights, prng, (0, 0), (center, 0), (center, center), (0, center), *args)
    _subdivide(heights, prng, (center, 0), (last, 0), (last, center), (center, center), *args)
    _subdivide(heights, prng, (center, center), (last, center), (last, last), (center, last), *args)
    _subdivide(heights, prng, (0, center), (center, center), (center, last), (0, last), *args)

    return heights


HeightGenerator = Callable[[TerrainConfig, AleaPRNG], np.ndarray]

GENERATORS: Dict[GeneratorKind, HeightGenerator] = {
    GeneratorKind.MOUNTAIN: lambda config, prng: mountain_heights(
        config.island_size, config.height_limit
    ),
    GeneratorKind.RANDOM: lambda config, prng: random_heights(
        config.island_size, config.height_limit, prng
    ),
    GeneratorKind.TERRAIN: lambda config, prng: terrain_heights(
        config.island_size,
        config.height_limit,
        prng,
        min_height=config.min_height,
        down_probability=config.nudge_probability,
    ),
}


def generate_heights(config: TerrainConfig, prng: AleaPRNG) -> np.ndarray:
    """Generate a height field with the strategy the config selects."""
    heights = GENERATORS[config.generator](config, prng)
    logger.debug(
        "Heights generated",
        generator=config.generator.value,
        min_height=float(heights.min()),
        max_height=float(heights.max()),
    )
    return heights
