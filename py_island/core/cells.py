"""
Cell model for the island grid.

A cell is a single square of the island. Land and ocean cells share one
record and are told apart by their kind. Neighbour links are flat indices
into the owning terrain rather than references to other cells, so the terrain
list is the only owner of cell storage.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from ..errors import TerrainStateError


class CellKind(str, Enum):
    """Cell variant."""

    LAND = "land"
    OCEAN = "ocean"


@dataclass
class Cell:
    """Represents a single square of the game area."""

    height: float  # feet
    x: int  # origin at the top-left corner
    y: int
    kind: CellKind = CellKind.LAND
    is_flooded: bool = False

    # Flat terrain indices, set once by fix_neighbors
    left: Optional[int] = None
    top: Optional[int] = None
    right: Optional[int] = None
    bottom: Optional[int] = None

    def __post_init__(self):
        if self.kind == CellKind.OCEAN:
            self.is_flooded = True

    @classmethod
    def ocean(cls, x: int, y: int, height: float = 0.0) -> "Cell":
        """Create a permanently flooded ocean cell at or below sea level."""
        return cls(height=min(height, 0.0), x=x, y=y, kind=CellKind.OCEAN)

    def is_ocean(self) -> bool:
        """Check if this cell is open ocean."""
        return self.kind == CellKind.OCEAN

    @property
    def is_wired(self) -> bool:
        """True once neighbour links have been assigned."""
        return self.left is not None

    @property
    def neighbor_indices(self) -> Tuple[int, int, int, int]:
        """Neighbour indices in (left, top, right, bottom) order."""
        if not self.is_wired:
            raise TerrainStateError(f"Cell ({self.x}, {self.y}) has no neighbours yet")
        return (self.left, self.top, self.right, self.bottom)

    def set_neighbors(self, left: int, top: int, right: int, bottom: int) -> None:
        """
        Set the neighbours of this cell.

        Raises:
            TerrainStateError: If the neighbours were already set
        """
        if self.is_wired:
            raise TerrainStateError(f"Cell ({self.x}, {self.y}) is already wired")
        self.left = left
        self.top = top
        self.right = right
        self.bottom = bottom

    def can_flood(self, water_height: float) -> bool:
        """Check if this cell would flood at the given water height."""
        return not self.is_flooded and self.height < water_height
