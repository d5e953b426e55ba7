"""Wrapper that reseeds an engine after a fixed amount of output."""

from __future__ import annotations

import logging

from entropic.core import RngCore
from entropic.errors import RandError
from entropic.rng import Rng

logger = logging.getLogger(__name__)


class ReseedingRng(Rng):
    """Reseed *core* from *reseeder* every *threshold* bytes.

    The check runs before each output, so a reseed happens on the first
    call after the budget is spent. A failed reseed is logged and the
    current state is kept; the next attempt comes after another
    ``threshold // 256`` bytes (immediately if the source reported
    ``NOT_READY``). Call ``reseed`` directly to see the error.

    Parameters
    ----------
    core : SeedableRng and RngCore
        Engine to wrap. Reseeding builds a new one with
        ``type(core).from_rng(reseeder)``.
    threshold : int
        Bytes of output between reseeds. ``0`` disables reseeding.
    reseeder : RngCore
        Source of fresh seeds.
    """

    def __init__(self, core, threshold: int, reseeder: RngCore) -> None:
        if threshold < 0:
            raise ValueError("threshold must be non-negative")
        self.core = core
        self.threshold = threshold
        self.reseeder = reseeder
        self._bytes_until_reseed = threshold if threshold > 0 else float("inf")

    def reseed(self) -> None:
        """Replace the core's state now.

        Raises
        ------
        RandError
            If the reseeder fails; the core is left as it was.
        """
        self.core = type(self.core).from_rng(self.reseeder)
        self._bytes_until_reseed = self.threshold if self.threshold > 0 else float("inf")
        logger.debug("reseeded %s", type(self.core).__name__)

    def _before_output(self, n_bytes: int) -> None:
        if self._bytes_until_reseed <= 0:
            try:
                self.reseed()
            except RandError as err:
                logger.warning("reseeding %s failed, keeping current state: %s",
                               type(self.core).__name__, err)
                self._bytes_until_reseed = 0 if err.kind.should_wait() else self.threshold >> 8
        self._bytes_until_reseed -= n_bytes

    def next_u32(self) -> int:
        self._before_output(4)
        return self.core.next_u32()

    def next_u64(self) -> int:
        self._before_output(8)
        return self.core.next_u64()

    def fill_bytes(self, dest) -> None:
        self._before_output(memoryview(dest).nbytes)
        self.core.fill_bytes(dest)

    def try_fill_bytes(self, dest) -> None:
        self._before_output(memoryview(dest).nbytes)
        self.core.try_fill_bytes(dest)

    @property
    def bytes_until_reseed(self) -> float:
        return self._bytes_until_reseed
