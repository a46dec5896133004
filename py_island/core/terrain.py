"""
Terrain engine: generation and flooding of the island grid.

generate_terrain() composes height generation, cell building and neighbour
wiring into one call and returns a Terrain. The Terrain owns its cells in a
flat row-major list; cells refer to their neighbours by index into that list.
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

import numpy as np
import structlog

from ..config.terrain_config import TerrainConfig
from ..errors import TerrainIndexError, TerrainStateError
from .alea_prng import AleaPRNG
from .cell_builder import CellGrid, build_cells
from .cells import Cell
from .heightfield import generate_heights
from .neighbors import fix_neighbors, flat_index

logger = structlog.get_logger()


@dataclass
class TerrainStats:
    """Cell counts for a terrain at one moment."""

    total: int
    ocean: int
    flooded: int  # includes ocean
    dry: int

    @property
    def flooded_fraction(self) -> float:
        return self.flooded / self.total if self.total else 0.0


class Terrain:
    """
    A wired grid of cells.

    Cells are addressed either by flat index (y * width + x) or by (x, y).
    """

    def __init__(self, cells: List[Cell], width: int, height: Optional[int] = None,
                 max_height: Optional[float] = None):
        """
        Initialize a terrain from wired cells.

        Args:
            cells: Cells in row-major order with neighbours set
            width: Cells per row
            height: Number of rows, defaults to width
            max_height: Peak height the terrain was generated with; defaults to
                the highest land cell, or 1 when there is no land

        Raises:
            TerrainStateError: If the cell count or wiring is inconsistent, or
                max_height is not positive
        """
        if height is None:
            height = width
        if len(cells) != width * height:
            raise TerrainStateError(
                f"Expected {width * height} cells for a {width}x{height} terrain, got {len(cells)}"
            )
        if any(not cell.is_wired for cell in cells):
            raise TerrainStateError("Terrain cells must be wired before use")

        if max_height is None:
            max_height = max((cell.height for cell in cells if not cell.is_ocean()), default=1.0)
            if max_height <= 0:
                max_height = 1.0
        elif max_height <= 0:
            raise TerrainStateError(f"max_height must be positive, got {max_height}")

        self._cells = cells
        self.width = width
        self.height = height
        self.max_height = max_height

    @classmethod
    def from_grid(cls, grid: CellGrid, max_height: Optional[float] = None) -> "Terrain":
        """Flatten a wired grid of rows into a terrain."""
        cells = [cell for row in grid for cell in row]
        width = len(grid[0]) if grid else 0
        return cls(cells, width, len(grid), max_height=max_height)

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def size(self) -> int:
        """Number of cells in the terrain."""
        return len(self._cells)

    def get(self, index: int) -> Cell:
        """
        Get a cell by flat index.

        Raises:
            TerrainIndexError: If the index is outside the terrain
        """
        if not 0 <= index < len(self._cells):
            raise TerrainIndexError(f"Cell index {index} out of range 0..{len(self._cells) - 1}")
        return self._cells[index]

    def index_of(self, x: int, y: int) -> int:
        """Flat index of the cell at (x, y)."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise TerrainIndexError(
                f"Coordinates ({x}, {y}) outside {self.width}x{self.height} terrain"
            )
        return flat_index(x, y, self.width)

    def cell_at(self, x: int, y: int) -> Cell:
        """Get the cell at (x, y)."""
        return self._cells[self.index_of(x, y)]

    def neighbors(self, cell: Cell) -> Tuple[Cell, Cell, Cell, Cell]:
        """Neighbour cells in (left, top, right, bottom) order."""
        left, top, right, bottom = cell.neighbor_indices
        return (self._cells[left], self._cells[top], self._cells[right], self._cells[bottom])

    def heights(self) -> np.ndarray:
        """Cell heights as a (height, width) array."""
        values = np.fromiter((cell.height for cell in self._cells), dtype=np.float64,
                             count=len(self._cells))
        return values.reshape(self.height, self.width)

    def flooded_mask(self) -> np.ndarray:
        """Flood state as a (height, width) boolean array."""
        values = np.fromiter((cell.is_flooded for cell in self._cells), dtype=bool,
                             count=len(self._cells))
        return values.reshape(self.height, self.width)

    def stats(self) -> TerrainStats:
        """Count ocean, flooded and dry cells."""
        ocean = sum(1 for cell in self._cells if cell.is_ocean())
        flooded = sum(1 for cell in self._cells if cell.is_flooded)
        return TerrainStats(
            total=len(self._cells),
            ocean=ocean,
            flooded=flooded,
            dry=len(self._cells) - flooded,
        )

    def flood(self, water_height: float) -> int:
        """
        Flood the terrain for the current water height.

        Only cells next to already flooded water can start a flood, so a low
        basin enclosed by higher ground stays dry until a neighbour floods.
        Flooding is one-way; calling this again with the same or a lower
        water height changes nothing.

        Args:
            water_height: Current water level in feet

        Returns:
            Number of cells newly flooded by this call
        """
        newly_flooded = 0
        for index, cell in enumerate(self._cells):
            if cell.is_ocean():
                continue
            if any(neighbor.is_flooded for neighbor in self.neighbors(cell)):
                newly_flooded += self._flood_from(index, water_height)

        if newly_flooded:
            logger.debug("Terrain flooded", water_height=water_height, newly_flooded=newly_flooded)
        return newly_flooded

    def _flood_from(self, start: int, water_height: float) -> int:
        """Depth-first flood fill from one cell through cells below the water."""
        flooded = 0
        stack = [start]
        while stack:
            cell = self._cells[stack.pop()]
            if not cell.can_flood(water_height):
                continue
            cell.is_flooded = True
            flooded += 1
            stack.extend(cell.neighbor_indices)
        return flooded


def generate_terrain(config: TerrainConfig, prng: Optional[AleaPRNG] = None) -> Terrain:
    """
    Generate a complete terrain.

    Heights are generated with the configured strategy, turned into land and
    ocean cells, and wired to their neighbours.

    Args:
        config: Terrain configuration
        prng: Random source; built from config.seed when omitted

    Returns:
        Wired Terrain owned by the caller
    """
    if prng is None:
        from ..utils.random import make_prng

        prng = make_prng(config.seed)

    heights = generate_heights(config, prng)
    grid = fix_neighbors(build_cells(heights, config))
    terrain = Terrain.from_grid(grid, max_height=config.height_limit)

    stats = terrain.stats()
    logger.info(
        "Terrain generated",
        generator=config.generator.value,
        seed=prng.seed,
        cells=stats.total,
        ocean=stats.ocean,
    )
    return terrain
