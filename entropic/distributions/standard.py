"""The default distribution for each supported type.

=================  ============================================  =========================
type spec          value                                         consumes
=================  ============================================  =========================
``bool``           top bit                                       one ``next_u32``
``int``            full signed 64-bit range                      one ``next_u64``
``float``          [0, 1), 53 bits of precision                  one ``next_u64``
numpy int <= 32b   full range of the dtype                       one ``next_u32``
numpy int 64b      full range of the dtype                       one ``next_u64``
``np.float32``     [0, 1), 24 bits of precision                  one ``next_u32``
``np.float64``     same as ``float``                             one ``next_u64``
``(A, B, ...)``    tuple, elements left to right                 sum of the elements
``Optional[T]``    ``None`` or a ``T``                           one ``bool``, then ``T``
``Array(T, n)``    ``n`` values of ``T``                         ``n`` times ``T``
=================  ============================================  =========================
"""

from __future__ import annotations

import types
import typing

import numpy as np

from entropic.distributions.base import Distribution

_F64_SCALE = 1.0 / (1 << 53)
_F32_SCALE = 1.0 / (1 << 24)


class Array:
    """Type spec for a fixed-length array of *length* values of *tp*."""

    __slots__ = ("tp", "length")

    def __init__(self, tp, length: int) -> None:
        if length < 0:
            raise ValueError("array length must be non-negative")
        self.tp = tp
        self.length = length

    def __repr__(self) -> str:
        return f"Array({self.tp!r}, {self.length})"


def _optional_arg(tp):
    """Return ``T`` if *tp* is ``Optional[T]``, else ``None``."""
    if typing.get_origin(tp) in (typing.Union, types.UnionType):
        args = typing.get_args(tp)
        rest = [a for a in args if a is not type(None)]
        if len(args) == 2 and len(rest) == 1:
            return rest[0]
    return None


def _numeric_dtype(tp) -> np.dtype | None:
    if tp is bool:
        return np.dtype(np.bool_)
    if tp is int:
        return np.dtype(np.int64)
    if tp is float:
        return np.dtype(np.float64)
    if isinstance(tp, type) and issubclass(tp, np.generic):
        dt = np.dtype(tp)
        if dt.kind in "biu" and dt.itemsize <= 8:
            return dt
        if dt.kind == "f" and dt.itemsize in (4, 8):
            return dt
    return None


def _check_supported(tp) -> None:
    if isinstance(tp, tuple):
        for t in tp:
            _check_supported(t)
    elif isinstance(tp, Array):
        _check_supported(tp.tp)
    elif _optional_arg(tp) is not None:
        _check_supported(_optional_arg(tp))
    elif _numeric_dtype(tp) is None:
        raise TypeError(f"no standard distribution for {tp!r}")


def _sample_integer(dt: np.dtype, rng):
    bits = dt.itemsize * 8
    raw = rng.next_u32() if bits <= 32 else rng.next_u64()
    raw &= (1 << bits) - 1
    if dt.kind == "i" and raw >= 1 << (bits - 1):
        raw -= 1 << bits
    return dt.type(raw)


def sample_standard(tp, rng):
    """Draw one value of type spec *tp* from *rng*."""
    if isinstance(tp, tuple):
        return tuple(sample_standard(t, rng) for t in tp)
    if isinstance(tp, Array):
        values = [sample_standard(tp.tp, rng) for _ in range(tp.length)]
        dt = _numeric_dtype(tp.tp)
        return np.array(values, dtype=dt) if dt is not None else values
    inner = _optional_arg(tp)
    if inner is not None:
        return sample_standard(inner, rng) if sample_standard(bool, rng) else None

    if tp is bool:
        return bool(rng.next_u32() >> 31)
    if tp is int:
        return int(_sample_integer(np.dtype(np.int64), rng))
    if tp is float:
        return (rng.next_u64() >> 11) * _F64_SCALE

    dt = _numeric_dtype(tp)
    if dt is None:
        raise TypeError(f"no standard distribution for {tp!r}")
    if dt.kind == "b":
        return np.bool_(rng.next_u32() >> 31)
    if dt.kind == "f":
        if dt.itemsize == 4:
            return np.float32((rng.next_u32() >> 8) * _F32_SCALE)
        return np.float64((rng.next_u64() >> 11) * _F64_SCALE)
    return _sample_integer(dt, rng)


class Standard(Distribution):
    """Default distribution for a type spec (see module docs)."""

    def __init__(self, tp=float) -> None:
        _check_supported(tp)
        self.tp = tp

    def sample(self, rng):
        return sample_standard(self.tp, rng)

    def __repr__(self) -> str:
        return f"Standard({self.tp!r})"
