"""Mock engine for tests."""

from __future__ import annotations

from entropic.core import MASK32, MASK64, fill_bytes_via_next
from entropic.rng import Rng


class StepRng(Rng):
    """Returns ``initial, initial + increment, ...`` from ``next_u64``.

    Arithmetic wraps at 64 bits. ``next_u32`` truncates a ``next_u64``
    and ``fill_bytes`` is built on ``next_u64``. Use it where a test needs
    exactly known output.
    """

    def __init__(self, initial: int, increment: int) -> None:
        self.v = initial & MASK64
        self.a = increment & MASK64

    def next_u64(self) -> int:
        result = self.v
        self.v = (self.v + self.a) & MASK64
        return result

    def next_u32(self) -> int:
        return self.next_u64() & MASK32

    def fill_bytes(self, dest) -> None:
        fill_bytes_via_next(self, dest)

    def __repr__(self) -> str:
        return f"StepRng(v={self.v:#x}, a={self.a:#x})"
