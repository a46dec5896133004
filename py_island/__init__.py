"""
py-island: terrain generation and flood propagation for an island survival game.
"""

__version__ = "0.1.0"
