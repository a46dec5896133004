"""Tests for the cell model, cell building and neighbour wiring."""

import pytest
import numpy as np
from py_island.core.cell_builder import build_radial_cells, build_threshold_cells
from py_island.core.cells import Cell, CellKind
from py_island.core.heightfield import mountain_heights
from py_island.core.neighbors import fix_neighbors, flat_index
from py_island.errors import TerrainStateError

ISLAND_SIZE = 64


class TestCell:
    """Test land and ocean cells."""

    def test_land_cell_starts_dry(self):
        cell = Cell(10.0, 3, 4)
        assert cell.kind == CellKind.LAND
        assert not cell.is_ocean()
        assert not cell.is_flooded
        assert not cell.is_wired

    def test_ocean_cell_starts_flooded(self):
        cell = Cell.ocean(1, 2)
        assert cell.is_ocean()
        assert cell.is_flooded
        assert cell.height == 0.0

    def test_ocean_height_never_positive(self):
        assert Cell.ocean(0, 0, height=5.0).height == 0.0
        assert Cell.ocean(0, 0, height=-3.0).height == -3.0

    def test_ocean_kind_forces_flooded(self):
        cell = Cell(0.0, 0, 0, kind=CellKind.OCEAN, is_flooded=False)
        assert cell.is_flooded

    def test_set_neighbors_once(self):
        """Neighbours may only be assigned once."""
        cell = Cell(1.0, 0, 0)
        cell.set_neighbors(0, 0, 1, 2)
        assert cell.neighbor_indices == (0, 0, 1, 2)
        with pytest.raises(TerrainStateError):
            cell.set_neighbors(0, 0, 1, 2)

    def test_neighbor_indices_before_wiring(self):
        with pytest.raises(TerrainStateError):
            Cell(1.0, 0, 0).neighbor_indices

    def test_can_flood(self):
        cell = Cell(5.0, 0, 0)
        assert cell.can_flood(6)
        assert not cell.can_flood(5)
        cell.is_flooded = True
        assert not cell.can_flood(10)


class TestCellBuilder:
    """Test ocean placement policies."""

    def test_radial_policy(self):
        heights = mountain_heights(ISLAND_SIZE, 32)
        grid = build_radial_cells(heights, center=32, ocean_distance=32)

        assert len(grid) == ISLAND_SIZE + 1
        assert all(len(row) == ISLAND_SIZE + 1 for row in grid)

        # grid is indexed [y][x]
        assert grid[5][13].is_ocean()
        assert grid[8][58].height == 0.0
        assert grid[1][33].is_ocean()
        assert grid[36][10].height == 6.0
        assert not grid[36][10].is_ocean()
        assert grid[56][10].is_ocean()

    def test_radial_boundary_is_ocean(self):
        """Distance exactly equal to ocean_distance is ocean."""
        heights = mountain_heights(ISLAND_SIZE, 32)
        grid = build_radial_cells(heights, center=32, ocean_distance=32)
        assert grid[32][0].is_ocean()
        assert not grid[32][1].is_ocean()

    def test_radial_coordinates(self):
        heights = mountain_heights(4, 2)
        grid = build_radial_cells(heights, center=2, ocean_distance=2)
        for y, row in enumerate(grid):
            for x, cell in enumerate(row):
                assert (cell.x, cell.y) == (x, y)

    def test_threshold_policy(self):
        heights = np.array([[-2.0, 0.0], [0.5, 7.0]])
        grid = build_threshold_cells(heights)

        assert grid[0][0].is_ocean()
        assert grid[0][0].height == 0.0
        assert grid[0][1].is_ocean()
        assert not grid[1][0].is_ocean()
        assert grid[1][1].height == 7.0
        assert grid[1][1].is_flooded is False


class TestNeighborWiring:
    """Test clamped neighbour wiring."""

    @pytest.fixture
    def grid(self):
        heights = mountain_heights(ISLAND_SIZE, 32)
        return fix_neighbors(build_radial_cells(heights, center=32, ocean_distance=32))

    def test_interior_neighbors(self, grid):
        side = ISLAND_SIZE + 1
        cell = grid[10][20]
        assert cell.left == flat_index(19, 10, side)
        assert cell.top == flat_index(20, 9, side)
        assert cell.right == flat_index(21, 10, side)
        assert cell.bottom == flat_index(20, 11, side)

    def test_left_edge_clamps_to_self(self, grid):
        side = ISLAND_SIZE + 1
        cell = grid[7][0]
        assert cell.left == flat_index(0, 7, side)
        assert cell.right == flat_index(1, 7, side)

    def test_right_edge_clamps_to_self(self, grid):
        side = ISLAND_SIZE + 1
        cell = grid[7][ISLAND_SIZE]
        assert cell.right == flat_index(ISLAND_SIZE, 7, side)
        assert cell.left == flat_index(ISLAND_SIZE - 1, 7, side)

    def test_corners(self, grid):
        side = ISLAND_SIZE + 1
        top_left = grid[0][0]
        assert top_left.left == top_left.top == 0
        bottom_right = grid[ISLAND_SIZE][ISLAND_SIZE]
        last = flat_index(ISLAND_SIZE, ISLAND_SIZE, side)
        assert bottom_right.right == bottom_right.bottom == last

    def test_every_cell_wired(self, grid):
        assert all(cell.is_wired for row in grid for cell in row)

    def test_rectangular_row(self):
        """A single row wires top and bottom to itself."""
        row = [Cell(1.0, x, 0) for x in range(5)]
        fix_neighbors([row])
        assert row[2].neighbor_indices == (1, 2, 3, 2)
        assert row[4].right == 4

    def test_rewiring_rejected(self, grid):
        with pytest.raises(TerrainStateError):
            fix_neighbors(grid)

    def test_ragged_grid_rejected(self):
        grid = [[Cell(1.0, 0, 0), Cell(1.0, 1, 0)], [Cell(1.0, 0, 1)]]
        with pytest.raises(TerrainStateError):
            fix_neighbors(grid)

    def test_empty_grid_rejected(self):
        with pytest.raises(TerrainStateError):
            fix_neighbors([])
