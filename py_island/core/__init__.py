"""
Core terrain generation and flooding functionality.
"""

from .alea_prng import AleaPRNG
from .cells import Cell, CellKind
from .heightfield import generate_heights, manhattan_distance
from .neighbors import fix_neighbors
from .terrain import Terrain, TerrainStats, generate_terrain
from .world import IslandWorld

__all__ = ['AleaPRNG', 'Cell', 'CellKind', 'generate_heights', 'manhattan_distance',
           'fix_neighbors', 'Terrain', 'TerrainStats', 'generate_terrain', 'IslandWorld']
