"""
Build cell grids from height fields.

Two policies decide which cells are open ocean:

- radial: everything at or beyond a Manhattan radius from the centre
- threshold: everything at or below sea level (height <= 0)
"""

from typing import List

import numpy as np

from ..config.terrain_config import GeneratorKind, TerrainConfig
from .cells import Cell
from .heightfield import manhattan_distance

CellGrid = List[List[Cell]]


def build_radial_cells(heights: np.ndarray, center: int, ocean_distance: int) -> CellGrid:
    """
    Build a diamond-shaped island.

    Args:
        heights: Height grid indexed [y, x]
        center: Centre coordinate on both axes
        ocean_distance: Manhattan distance at which the ocean starts

    Returns:
        Rows of cells, ocean outside the diamond
    """
    grid = []
    rows, cols = heights.shape
    for y in range(rows):
        row = []
        for x in range(cols):
            if manhattan_distance(x, y, center, center) < ocean_distance:
                row.append(Cell(float(heights[y, x]), x, y))
            else:
                row.append(Cell.ocean(x, y))
        grid.append(row)
    return grid


def build_threshold_cells(heights: np.ndarray) -> CellGrid:
    """Build cells, turning every cell at or below sea level into ocean."""
    grid = []
    rows, cols = heights.shape
    for y in range(rows):
        row = []
        for x in range(cols):
            height = float(heights[y, x])
            if height <= 0:
                row.append(Cell.ocean(x, y))
            else:
                row.append(Cell(height, x, y))
        grid.append(row)
    return grid


def build_cells(heights: np.ndarray, config: TerrainConfig) -> CellGrid:
    """Build cells with the policy that matches the configured generator."""
    if config.generator == GeneratorKind.TERRAIN:
        return build_threshold_cells(heights)
    return build_radial_cells(heights, config.center, config.ocean_distance)
