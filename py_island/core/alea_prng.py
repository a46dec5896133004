"""
Python implementation of the Alea PRNG.

Based on Johannes Baagøe's Alea algorithm. Seeds are arbitrary strings (or
anything with a string form), so terrains can be reproduced from a short,
human-readable seed such as "island-42".
"""


def _uint32(n):
    """Convert to unsigned 32-bit integer."""
    return int(n) & 0xFFFFFFFF


_TWO_POW_32 = 0x100000000
_TWO_POW_NEG_32 = 2.3283064365386963e-10


class _Mash:
    """Stateful string hash that derives the initial generator state."""

    def __init__(self):
        self.n = 0xEFC8249D

    def __call__(self, data) -> float:
        n = self.n
        for char in str(data):
            n += ord(char)
            h = 0.02519603282416938 * n
            n = _uint32(h)
            h = (h - n) * n
            n = _uint32(h)
            h -= n
            n += h * _TWO_POW_32
        self.n = n
        return _uint32(n) * _TWO_POW_NEG_32


class AleaPRNG:
    """
    Seedable uniform random source used by the height generators.

    Generators take an instance explicitly instead of reaching for a global,
    so two generators built from the same seed produce identical terrain.
    """

    def __init__(self, seed):
        """Initialize with seed string or number."""
        self.seed = str(seed)

        mash = _Mash()
        state = [mash(" ") for _ in range(3)]
        for i in range(3):
            state[i] -= mash(self.seed)
            if state[i] < 0:
                state[i] += 1
        self.s0, self.s1, self.s2 = state
        self.c = 1

    def random(self) -> float:
        """Generate next random number in [0, 1)."""
        t = 2091639 * self.s0 + self.c * _TWO_POW_NEG_32
        self.s0 = self.s1
        self.s1 = self.s2
        self.c = int(t)
        self.s2 = t - self.c
        return self.s2

    def randint(self, low: int, high: int) -> int:
        """Return an integer in [low, high], both ends inclusive."""
        return int(self.random() * (high - low + 1)) + low

