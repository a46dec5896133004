"""Exceptions raised by the island engine."""


class IslandError(Exception):
    """Base class for all island engine errors."""


class ConfigurationError(IslandError, ValueError):
    """Raised for degenerate or inconsistent terrain configuration."""


class TerrainIndexError(IslandError, IndexError):
    """Raised when a flat index or coordinate pair is outside the terrain."""


class TerrainStateError(IslandError, RuntimeError):
    """Raised when the cell grid is used in the wrong lifecycle stage."""


class InvalidBlendError(IslandError, ValueError):
    """Raised when a colour blend factor is outside [0, 1]."""
