"""
Random source helpers.

Every randomized operation takes an explicit AleaPRNG. These helpers build one
from an optional seed; without a seed a fresh one is drawn so that each
unseeded terrain differs.
"""

import uuid
from typing import Optional

from ..core.alea_prng import AleaPRNG


def new_seed() -> str:
    """Return a fresh random seed string."""
    return uuid.uuid4().hex


def make_prng(seed: Optional[str] = None) -> AleaPRNG:
    """
    Create an Alea PRNG.

    Args:
        seed: Seed string; a fresh one is generated when omitted

    Returns:
        AleaPRNG instance
    """
    if seed is None:
        seed = new_seed()
    return AleaPRNG(seed)
