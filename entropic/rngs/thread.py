"""Per-thread engine: the lowest-friction way to get random values.

Usage::

    from entropic import random, thread_rng

    random()                 # float in [0, 1)
    random(np.uint8)
    thread_rng().gen_range(1, 7)
"""

from __future__ import annotations

import logging
import os
import threading

from entropic.rng import Rng
from entropic.rngs.entropy import EntropyRng
from entropic.rngs.numpy_compat import StdRng
from entropic.rngs.reseeding import ReseedingRng

logger = logging.getLogger(__name__)

#: Bytes a thread's engine produces before it is reseeded from entropy.
THREAD_RNG_RESEED_THRESHOLD = 32 * 1024 * 1024

#: Environment variable overriding ``THREAD_RNG_RESEED_THRESHOLD``.
RESEED_THRESHOLD_ENV = "ENTROPIC_RESEED_THRESHOLD"


def reseed_threshold() -> int:
    """Reseed threshold for new thread engines, honouring the environment."""
    raw = os.environ.get(RESEED_THRESHOLD_ENV)
    if raw is None or not raw.strip():
        return THREAD_RNG_RESEED_THRESHOLD
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{RESEED_THRESHOLD_ENV} must be an integer, got {raw!r}") from None
    if value < 0:
        raise ValueError(f"{RESEED_THRESHOLD_ENV} must be non-negative, got {value}")
    return value


class _ThreadState(threading.local):
    engine: ReseedingRng | None = None


_state = _ThreadState()


def _build_engine() -> ReseedingRng:
    threshold = reseed_threshold()
    logger.debug("creating engine for thread %s (reseed every %d bytes)",
                 threading.current_thread().name, threshold)
    return ReseedingRng(StdRng.from_entropy(), threshold, EntropyRng())


class ThreadRng(Rng):
    """Handle to the engine of the thread that called ``thread_rng``.

    The engine is entropy-seeded on first use in each thread and reseeded
    every ``THREAD_RNG_RESEED_THRESHOLD`` bytes. It lives as long as its
    thread. Handles are cheap; do not pass one to another thread.
    """

    def __init__(self, engine: ReseedingRng) -> None:
        self._engine = engine

    def next_u32(self) -> int:
        return self._engine.next_u32()

    def next_u64(self) -> int:
        return self._engine.next_u64()

    def fill_bytes(self, dest) -> None:
        self._engine.fill_bytes(dest)

    def try_fill_bytes(self, dest) -> None:
        self._engine.try_fill_bytes(dest)

    @property
    def engine(self) -> ReseedingRng:
        return self._engine


def thread_rng() -> ThreadRng:
    """Return a handle to the calling thread's engine, creating it if needed.

    Raises ``FatalRandError`` if the first use in a thread cannot obtain
    seed entropy.
    """
    engine = _state.engine
    if engine is None:
        engine = _state.engine = _build_engine()
    return ThreadRng(engine)


def random(tp=float):
    """Return ``thread_rng().gen(tp)``."""
    return thread_rng().gen(tp)
