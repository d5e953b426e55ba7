"""Engines backed by numpy bit generators.

Usage::

    from entropic.rngs import StdRng
    rng = StdRng.seed_from_u64(42)
    rng.gen_range(0, 100)
"""

from __future__ import annotations

import numpy as np

from entropic.core import MASK32, SeedableRng, byte_view
from entropic.rng import Rng

# Words fetched from the bit generator per refill.
_BLOCK_WORDS = 256


class NumpyRng(Rng):
    """An ``Rng`` over any ``numpy.random.BitGenerator``.

    Output is one stream of 64-bit words read through ``random_raw``:

    * ``next_u64`` takes one word.
    * ``next_u32`` takes one word and keeps its low 32 bits.
    * ``fill_bytes(dest)`` takes ``ceil(len(dest) / 8)`` words, writes
      them little-endian and drops the unused tail of the last word.

    Words are fetched in blocks, which does not change the stream.

    Parameters
    ----------
    bit_generator : numpy.random.BitGenerator
        Exclusively owned by this engine from now on.
    """

    def __init__(self, bit_generator: np.random.BitGenerator) -> None:
        self._bg = bit_generator
        self._buf = np.empty(0, dtype=np.uint64)
        self._pos = 0

    def _take(self, n: int) -> np.ndarray:
        avail = self._buf.size - self._pos
        if n <= avail:
            out = self._buf[self._pos:self._pos + n]
            self._pos += n
            return out
        head = self._buf[self._pos:]
        rest = n - avail
        fresh = np.asarray(self._bg.random_raw(rest + _BLOCK_WORDS), dtype=np.uint64)
        self._buf = fresh
        self._pos = rest
        return np.concatenate((head, fresh[:rest]))

    def next_u64(self) -> int:
        if self._pos >= self._buf.size:
            self._buf = np.asarray(self._bg.random_raw(_BLOCK_WORDS), dtype=np.uint64)
            self._pos = 0
        word = int(self._buf[self._pos])
        self._pos += 1
        return word

    def next_u32(self) -> int:
        return self.next_u64() & MASK32

    def fill_bytes(self, dest) -> None:
        view = byte_view(dest)
        n = len(view)
        if n == 0:
            return
        words = self._take((n + 7) // 8)
        view[:] = words.astype("<u8").tobytes()[:n]

    @property
    def bit_generator(self) -> np.random.BitGenerator:
        return self._bg

    @property
    def state(self) -> dict:
        return {
            "engine": type(self).__name__,
            "bit_generator": self._bg.state,
            "buffered_words": int(self._buf.size - self._pos),
        }

    def __repr__(self) -> str:
        return f"<{type(self).__name__} bit_generator={type(self._bg).__name__}>"


class _SeedableNumpyRng(NumpyRng, SeedableRng):
    """Seeded from 32 bytes, read as one little-endian integer."""

    BIT_GENERATOR: type[np.random.BitGenerator]

    @classmethod
    def from_seed(cls, seed: bytes):
        if len(seed) != cls.SEED_SIZE:
            raise ValueError(f"{cls.__name__} seed must be {cls.SEED_SIZE} bytes, got {len(seed)}")
        return cls(cls.BIT_GENERATOR(int.from_bytes(seed, "little")))


class StdRng(_SeedableNumpyRng):
    """General-purpose engine on numpy's PCG64."""

    BIT_GENERATOR = np.random.PCG64


class SmallRng(_SeedableNumpyRng):
    """Fast engine on numpy's SFC64."""

    BIT_GENERATOR = np.random.SFC64
