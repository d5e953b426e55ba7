"""Uniform sampling over a range.

Integer ranges use rejection sampling: with span ``s`` and a native draw
width of ``w`` bits, only raw values below ``zone = floor(2**w / s) * s``
are accepted and reduced modulo ``s``. Every residue then has exactly
``floor(2**w / s)`` preimages, so the result carries no modulo bias. Since
``zone > 2**w / 2``, fewer than two draws are needed on average.

Float ranges scale random mantissa bits into [0, 1) and map the result
affinely onto the range. A sample that rounds up to the exclusive upper
bound is drawn again.
"""

from __future__ import annotations

import math

import numpy as np

from entropic.distributions.base import Distribution
from entropic.errors import InvalidRangeError


def _resolve_dtype(low, high, dtype) -> np.dtype | None:
    """Pick the sample type; ``None`` means an unbounded Python int."""
    if dtype is not None:
        if dtype is int:
            return None
        if dtype is float:
            return np.dtype(np.float64)
        dt = np.dtype(dtype)
        if dt.kind not in "iuf":
            raise TypeError(f"cannot sample a uniform range of {dt}")
        return dt
    for v in (low, high):
        if isinstance(v, (bool, np.bool_)):
            raise TypeError("cannot sample a uniform range of bool")
        if not isinstance(v, (int, float, np.integer, np.floating)):
            raise TypeError(f"unsupported range bound {v!r}")
    typed = [v for v in (low, high) if isinstance(v, np.generic)]
    if typed:
        dt = np.result_type(*typed)
        if all(np.dtype(type(v)).kind in "iu" for v in typed) and dt.kind == "f":
            # int64 with uint64 has no common integer dtype
            dt = None
        if any(isinstance(v, float) for v in (low, high)):
            if dt is None or dt.kind in "iu":
                return np.dtype(np.float64)
        return dt
    if isinstance(low, float) or isinstance(high, float):
        return np.dtype(np.float64)
    return None


class _IntSampler:
    __slots__ = ("low", "span", "width", "zone", "_cast")

    def __init__(self, low: int, span: int, dtype: np.dtype | None) -> None:
        self.low = low
        self.span = span
        if dtype is not None:
            self.width = 32 if dtype.itemsize <= 4 else 64
            self._cast = dtype.type
        else:
            bits = (span - 1).bit_length()
            self.width = 32 if bits <= 32 else 64 * math.ceil(bits / 64)
            self._cast = int
        self.zone = ((1 << self.width) // span) * span

    def _draw(self, rng) -> int:
        if self.width == 32:
            return rng.next_u32()
        if self.width == 64:
            return rng.next_u64()
        v = 0
        for i in range(self.width // 64):
            v |= rng.next_u64() << (64 * i)
        return v

    def sample(self, rng):
        while True:
            v = self._draw(rng)
            if v < self.zone:
                return self._cast(self.low + v % self.span)


class _FloatSampler:
    __slots__ = ("low", "high", "scale", "inclusive", "_single", "_cast", "_wide")

    def __init__(self, low: float, high: float, dtype: np.dtype, inclusive: bool) -> None:
        self.low = low
        self.high = high
        if not (math.isfinite(low) and math.isfinite(high)):
            raise InvalidRangeError(f"range [{low}, {high}) is not finite")
        self.scale = high - low
        self.inclusive = inclusive
        self._single = dtype.itemsize == 4
        self._cast = np.float32 if self._single else float
        # high - low overflows for wide ranges of opposite sign.
        self._wide = not math.isfinite(self.scale)

    def sample(self, rng):
        while True:
            if self._single:
                unit = (rng.next_u32() >> 8) * (1.0 / (1 << 24))
            else:
                unit = (rng.next_u64() >> 11) * (1.0 / (1 << 53))
            if self._wide:
                value = self._cast(self.low * (1.0 - unit) + self.high * unit)
            else:
                value = self._cast(self.low + self.scale * unit)
            if value < self.high or (self.inclusive and value <= self.high):
                return value


def _make_sampler(low, high, dtype, inclusive: bool):
    dt = _resolve_dtype(low, high, dtype)
    if dt is not None and dt.kind == "f":
        lo, hi = float(low), float(high)
        ok = lo <= hi if inclusive else lo < hi
        if not ok:
            raise InvalidRangeError(f"invalid range: low={low!r}, high={high!r}")
        return _FloatSampler(lo, hi, dt, inclusive)

    if isinstance(low, (float, np.floating)) or isinstance(high, (float, np.floating)):
        if not (float(low).is_integer() and float(high).is_integer()):
            raise TypeError("integer range bounds must be whole numbers")
    lo, hi = int(low), int(high)
    if inclusive:
        hi += 1
    if not lo < hi:
        raise InvalidRangeError(f"invalid range: low={low!r}, high={high!r}")
    if dt is not None:
        info = np.iinfo(dt)
        if lo < info.min or hi - 1 > info.max:
            raise InvalidRangeError(f"range [{low}, {high}) does not fit in {dt}")
    return _IntSampler(lo, hi - lo, dt)


class Uniform(Distribution):
    """Uniform distribution over ``[low, high)``.

    The sample type follows the bounds: Python ints give ints, floats give
    floats, numpy scalars keep their dtype. Pass *dtype* to force one.
    Construction validates the range; an invalid range raises
    ``InvalidRangeError`` before anything is drawn.

    Consumption: integer spans up to ``2**32`` (and every type at most 32
    bits wide) draw ``next_u32`` values, wider spans ``next_u64``; one
    draw per attempt. Floats draw one ``next_u64`` per attempt (``next_u32``
    for float32).
    """

    def __init__(self, low, high, dtype=None) -> None:
        self._low = low
        self._high = high
        self._sampler = _make_sampler(low, high, dtype, inclusive=False)

    @classmethod
    def new_inclusive(cls, low, high, dtype=None) -> Uniform:
        """Uniform distribution over ``[low, high]``."""
        obj = cls.__new__(cls)
        obj._low = low
        obj._high = high
        obj._sampler = _make_sampler(low, high, dtype, inclusive=True)
        return obj

    @property
    def low(self):
        return self._low

    @property
    def high(self):
        return self._high

    def sample(self, rng):
        return self._sampler.sample(rng)

    def __repr__(self) -> str:
        return f"Uniform(low={self._low!r}, high={self._high!r})"


def sample_single(low, high, rng, dtype=None):
    """Draw one value uniformly from ``[low, high)``."""
    return _make_sampler(low, high, dtype, inclusive=False).sample(rng)
