"""
Python implementation of d3's linear congruential generator.

Port of d3-random's randomLcg, the generator the graph tool seeds its point
layouts from. Arithmetic follows JavaScript's 32-bit integer coercion so a
given seed reproduces the exact same stream.
"""

import math

MULTIPLIER = 0x19660D
INCREMENT = 0x3C6EF35F
EPSILON = 1 / 0x100000000  # 2^-32


def _int32(n):
    """Convert to signed 32-bit integer (JavaScript `n | 0`)."""
    if isinstance(n, float) and not math.isfinite(n):
        return 0
    n = int(n) & 0xFFFFFFFF
    return n - 0x100000000 if n & 0x80000000 else n


def _uint32(n):
    """Convert to unsigned 32-bit integer (JavaScript `n >>> 0`)."""
    return int(n) & 0xFFFFFFFF


class LcgPRNG:
    """
    LCG PRNG matching the JavaScript version in d3-random.

    Seeds in [0, 1) are scaled up to the full 32-bit range, any other
    seed is used by absolute value.
    """

    def __init__(self, seed):
        """Initialize with a numeric seed."""
        self.call_count = 0

        seed = float(seed)
        if 0 <= seed < 1:
            self.state = _int32(seed / EPSILON)
        else:
            self.state = _int32(abs(seed))

    def random(self):
        """Generate next random number in [0, 1)."""
        self.call_count += 1
        self.state = _int32(MULTIPLIER * self.state + INCREMENT)
        return EPSILON * _uint32(self.state)

    def randint(self, upper):
        """Draw floor(random() * upper)."""
        return math.floor(self.random() * upper)
