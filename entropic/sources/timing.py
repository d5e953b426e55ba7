"""Clock jitter entropy source."""

from __future__ import annotations

import time

import numpy as np

from entropic.conditioning import sha256_condition, xor_fold
from entropic.errors import ErrorKind, RandError
from entropic.sources.base import EntropySource


class JitterRng(EntropySource):
    """Entropy from differences between independent clock domains.

    ``time.perf_counter_ns()`` and ``time.monotonic_ns()`` may be driven
    by different oscillators. Their difference drifts unpredictably, and
    the low bits of successive differences carry the jitter. Each sample
    is XOR-folded to one byte and the raw stream is SHA-256 conditioned.

    Used as the fallback when the OS source fails.

    Parameters
    ----------
    samples_per_byte : int
        Raw timing samples collected per output byte.
    """

    name = "clock_jitter"
    description = "Phase noise between perf_counter and monotonic clocks"
    platform_requirements: list[str] = []

    # Fewer distinct deltas than this in a probe means the timer is too coarse.
    MIN_DISTINCT_DELTAS = 4

    def __init__(self, samples_per_byte: int = 8) -> None:
        if samples_per_byte < 1:
            raise ValueError("samples_per_byte must be at least 1")
        self.samples_per_byte = samples_per_byte

    def collect(self, n_samples: int) -> np.ndarray:
        """Collect *n_samples* raw jitter bytes."""
        diffs = np.empty(n_samples + 1, dtype=np.int64)
        for i in range(n_samples + 1):
            diffs[i] = time.perf_counter_ns() - time.monotonic_ns()
        deltas = np.diff(diffs)
        return xor_fold(deltas.view(np.uint8), 8)

    def _check_timer(self) -> None:
        probe = time.perf_counter_ns()
        stamps = [time.perf_counter_ns() - probe for _ in range(64)]
        if len(set(np.diff(stamps).tolist())) < self.MIN_DISTINCT_DELTAS:
            raise RandError(ErrorKind.UNAVAILABLE, "timer resolution too coarse for jitter entropy")

    def is_available(self) -> bool:
        try:
            self._check_timer()
        except RandError:
            return False
        return True

    def try_fill_bytes(self, dest) -> None:
        view = self._view(dest)
        if len(view) == 0:
            return
        self._check_timer()
        raw = self.collect(len(view) * self.samples_per_byte)
        view[:] = sha256_condition(raw, len(view))
