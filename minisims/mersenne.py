"""The MT19937 pseudo-random generator and the deck-cut source built on it."""

from __future__ import annotations

from collections.abc import Sequence

_N = 624
_M = 397
_MATRIX_A = 0x9908B0DF
_UPPER_MASK = 0x80000000
_LOWER_MASK = 0x7FFFFFFF
_MASK32 = 0xFFFFFFFF

DEFAULT_SEED = 5489


class MersenneTwister:
    """A 32-bit Mersenne Twister (MT19937) generator."""

    def __init__(self, seed: int = DEFAULT_SEED) -> None:
        self._mt: list[int] = []
        self._index = _N
        self.seed(seed)

    def seed(self, s: int) -> None:
        """Reinitialise the state from a single integer seed."""
        mt = [s & _MASK32]
        for i in range(1, _N):
            prev = mt[-1]
            mt.append((1812433253 * (prev ^ (prev >> 30)) + i) & _MASK32)
        self._mt = mt
        self._index = _N

    def seed_by_array(self, key: Sequence[int]) -> None:
        """Reinitialise the state from a non-empty sequence of 32-bit words."""
        words = [word & _MASK32 for word in key]
        if not words:
            raise ValueError("key must hold at least one word")
        self.seed(19650218)
        mt = self._mt
        i, j = 1, 0
        for _ in range(max(_N, len(words))):
            prev = mt[i - 1]
            mt[i] = ((mt[i] ^ ((prev ^ (prev >> 30)) * 1664525)) + words[j] + j) & _MASK32
            i += 1
            j += 1
            if i >= _N:
                mt[0] = mt[_N - 1]
                i = 1
            if j >= len(words):
                j = 0
        for _ in range(_N - 1):
            prev = mt[i - 1]
            mt[i] = ((mt[i] ^ ((prev ^ (prev >> 30)) * 1566083941)) - i) & _MASK32
            i += 1
            if i >= _N:
                mt[0] = mt[_N - 1]
                i = 1
        mt[0] = 0x80000000
        self._index = _N

    def _twist(self) -> None:
        mt = self._mt
        for kk in range(_N):
            y = (mt[kk] & _UPPER_MASK) | (mt[(kk + 1) % _N] & _LOWER_MASK)
            mt[kk] = mt[(kk + _M) % _N] ^ (y >> 1) ^ (_MATRIX_A if y & 1 else 0)
        self._index = 0

    def next_uint32(self) -> int:
        """Return a random integer in [0, 0xffffffff]."""
        if self._index >= _N:
            self._twist()
        y = self._mt[self._index]
        self._index += 1
        y ^= y >> 11
        y ^= (y << 7) & 0x9D2C5680
        y ^= (y << 15) & 0xEFC60000
        y ^= y >> 18
        return y & _MASK32

    def next_int31(self) -> int:
        """Return a random integer in [0, 0x7fffffff]."""
        return self.next_uint32() >> 1

    def real1(self) -> float:
        """Return a random float in [0, 1]."""
        return self.next_uint32() * (1.0 / 4294967295.0)

    def real2(self) -> float:
        """Return a random float in [0, 1)."""
        return self.next_uint32() * (1.0 / 4294967296.0)

    def real3(self) -> float:
        """Return a random float in (0, 1)."""
        return (self.next_uint32() + 0.5) * (1.0 / 4294967296.0)

    def res53(self) -> float:
        """Return a random float in [0, 1) with 53-bit resolution."""
        a = self.next_uint32() >> 5
        b = self.next_uint32() >> 6
        return (a * 67108864.0 + b) * (1.0 / 9007199254740992.0)


class CutGenerator:
    """Produces deck-cut positions between 13 and 39 inclusive."""

    MINIMUM = 13
    MAXIMUM = 39

    def __init__(self, seed: int = 0) -> None:
        self._rng = MersenneTwister(seed)

    def next_cut(self) -> int:
        """Return the next cut position."""
        spread = self.MAXIMUM - self.MINIMUM + 1
        return self.MINIMUM + self._rng.next_uint32() % spread