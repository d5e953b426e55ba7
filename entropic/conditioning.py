"""Conditioning for raw timing entropy.

Raw jitter samples are biased and correlated; these turn them into bytes
fit for seeding.
"""

from __future__ import annotations

import hashlib
import struct

import numpy as np


def xor_fold(data: np.ndarray, fold_factor: int = 2) -> np.ndarray:
    """XOR each run of *fold_factor* bytes down to one byte.

    Trailing bytes that do not fill a whole run are dropped.
    """
    data = np.asarray(data, dtype=np.uint8).reshape(-1)
    n = len(data) - (len(data) % fold_factor)
    chunks = data[:n].reshape(-1, fold_factor)
    return np.bitwise_xor.reduce(chunks, axis=1).astype(np.uint8)


def sha256_condition(data: np.ndarray | bytes, output_bytes: int = 32) -> bytes:
    """Expand *data* into *output_bytes* with counter-mode SHA-256."""
    raw = data if isinstance(data, bytes) else np.asarray(data, dtype=np.uint8).tobytes()
    result = bytearray()
    counter = 0
    while len(result) < output_bytes:
        result += hashlib.sha256(struct.pack(">I", counter) + raw).digest()
        counter += 1
    return bytes(result[:output_bytes])
