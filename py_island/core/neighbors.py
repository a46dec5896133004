"""Neighbour wiring for cell grids."""

from ..errors import TerrainStateError
from .cell_builder import CellGrid


def flat_index(x: int, y: int, width: int) -> int:
    """Row-major flat index of (x, y) in a grid with the given width."""
    return y * width + x


def fix_neighbors(grid: CellGrid) -> CellGrid:
    """
    Set the four neighbours of every cell in a rectangular grid.

    Neighbours are clamped at the edges rather than wrapped, so a cell on the
    left edge is its own left neighbour, and so on for the other edges.

    Args:
        grid: Fully built rows of cells

    Returns:
        The same grid, wired in place

    Raises:
        TerrainStateError: If rows differ in length or a cell is already wired
    """
    if not grid or not grid[0]:
        raise TerrainStateError("Cannot wire an empty cell grid")

    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise TerrainStateError("Cell grid rows must all have the same length")

    last_x = width - 1
    last_y = len(grid) - 1
    for row in grid:
        for cell in row:
            x, y = cell.x, cell.y
            cell.set_neighbors(
                left=flat_index(max(x - 1, 0), y, width),
                top=flat_index(x, max(y - 1, 0), width),
                right=flat_index(min(x + 1, last_x), y, width),
                bottom=flat_index(x, min(y + 1, last_y), width),
            )
    return grid
