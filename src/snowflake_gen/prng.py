"""Module defining the seeded pseudo-random stream used by the generator.

A string seed is folded into a 32-bit integer with an FNV-1a style hash,
avalanche-mixed once, and used to seed a Mulberry32 generator. The bit
operations reproduce the reference stream exactly, so a seed shared between
users always regrows the same snowflake.
"""

from __future__ import annotations

import logging

_LOGGER = logging.getLogger(__name__)

_MASK32 = 0xFFFFFFFF
_FNV_OFFSET = 2166136261
_FNV_PRIME = 16777619
_MULBERRY_INCREMENT = 0x6D2B79F5
_TWO_32 = 4294967296.0


def _imul(a: int, b: int) -> int:
    """32-bit wrapping multiplication on unsigned operands."""
    return (a * b) & _MASK32


def _code_units(text: str) -> list[int]:
    """Return the UTF-16 code units of `text`.

    Characters outside the Basic Multilingual Plane contribute their
    surrogate pair, matching how browser strings index characters.
    """
    raw = text.encode("utf-16-le", "surrogatepass")
    return [raw[i] | (raw[i + 1] << 8) for i in range(0, len(raw), 2)]


class StringHash:
    """FNV-1a string hash with a repeatable avalanche mixer.

    Construction folds the string; every call mixes the accumulator further
    and returns the new 32-bit value.

    Attributes:
        state (int): Current 32-bit accumulator.
    """

    def __init__(self, text: str) -> None:
        h = _FNV_OFFSET
        for unit in _code_units(text):
            h ^= unit
            h = _imul(h, _FNV_PRIME)
        self.state = h
        _LOGGER.debug("StringHash(%r) folded to %d", text, h)

    def __call__(self) -> int:
        h = self.state
        h = (h + (h << 13)) & _MASK32
        h ^= h >> 7
        h = (h + (h << 3)) & _MASK32
        h ^= h >> 17
        h = (h + (h << 5)) & _MASK32
        self.state = h
        return h


class Mulberry32:
    """Small fast 32-bit generator yielding floats in [0, 1).

    Attributes:
        state (int): Current 32-bit state, advanced on every draw.
    """

    def __init__(self, state: int) -> None:
        self.state = int(state) & _MASK32

    def __call__(self) -> float:
        a = (self.state + _MULBERRY_INCREMENT) & _MASK32
        self.state = a
        t = _imul(a ^ (a >> 15), 1 | a)
        t ^= (t + _imul(t ^ (t >> 7), 61 | t)) & _MASK32
        return ((t ^ (t >> 14)) & _MASK32) / _TWO_32

    def uniform(self, a: float = 0.0, b: float = 1.0) -> float:
        """Draw a value in [a, b) from the stream."""
        return a + (b - a) * self()

    def take(self, n: int) -> list[float]:
        """Draw the next `n` values."""
        return [self() for _ in range(n)]


def seeded(seed: str) -> Mulberry32:
    """Create a generator from a string seed.

    Args:
        seed (str): Any string, including the empty string.

    Returns:
        Mulberry32: A fresh generator seeded from the first mixed hash value.
    """
    first = StringHash(seed)()
    _LOGGER.debug("seeded(%r): mulberry32 state=%d", seed, first)
    return Mulberry32(first)
