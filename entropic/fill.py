"""Bulk filling of integer buffers with random bytes.

A destination of N elements of a K-byte integer type receives exactly
N*K bytes from the bit source. Each K-byte chunk is decoded as a
little-endian integer, so a given engine and seed produce the same
element values on every host byte order. Single-byte destinations are
copied as-is.

Accepted destinations: numpy integer arrays of any shape (including
views), and writable buffer objects with an integer format such as
``bytearray`` or ``array.array``.
"""

from __future__ import annotations

import numpy as np


def _as_integer_array(dest) -> np.ndarray:
    if isinstance(dest, np.ndarray):
        arr = dest
    else:
        try:
            arr = np.asarray(memoryview(dest))
        except TypeError:
            raise TypeError(
                f"cannot fill {type(dest).__name__}: expected an integer array or writable buffer"
            ) from None
    if arr.dtype.kind not in "iu":
        raise TypeError(f"cannot fill an array of {arr.dtype}; only integer types are supported")
    return arr


def _fill_with(fill_bytes, dest) -> None:
    arr = _as_integer_array(dest)
    n_bytes = arr.size * arr.dtype.itemsize
    if n_bytes == 0:
        return
    if not arr.flags.writeable:
        raise TypeError("destination buffer is read-only")
    buf = bytearray(n_bytes)
    fill_bytes(buf)
    if arr.dtype.itemsize == 1:
        decoded = np.frombuffer(buf, dtype=arr.dtype)
    else:
        decoded = np.frombuffer(buf, dtype=arr.dtype.newbyteorder("<"))
    arr[...] = decoded.reshape(arr.shape)


def fill(rng, dest) -> None:
    """Fill *dest* using ``rng.fill_bytes``.

    Raises ``FatalRandError`` if the source fails.
    """
    _fill_with(rng.fill_bytes, dest)


def try_fill(rng, dest) -> None:
    """Fill *dest* using ``rng.try_fill_bytes``.

    Raises
    ------
    RandError
        If the source fails. *dest* is left unchanged.
    """
    _fill_with(rng.try_fill_bytes, dest)
