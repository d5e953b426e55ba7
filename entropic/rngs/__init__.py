"""Engines: seedable generators, mocks and wrappers."""

from entropic.rngs.entropy import EntropyRng
from entropic.rngs.mock import StepRng
from entropic.rngs.numpy_compat import NumpyRng, SmallRng, StdRng
from entropic.rngs.reseeding import ReseedingRng
from entropic.rngs.thread import ThreadRng, thread_rng

__all__ = [
    "EntropyRng",
    "NumpyRng",
    "ReseedingRng",
    "SmallRng",
    "StdRng",
    "StepRng",
    "ThreadRng",
    "thread_rng",
]
