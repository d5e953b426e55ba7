"""
entropic: pluggable bit sources and bias-free sampling.

Random values are made in two steps: an engine (``RngCore``) produces raw
bits, and a distribution turns them into a value of the requested shape.
Every engine gets the sampling methods of ``Rng``::

    from entropic import StdRng, random

    rng = StdRng.seed_from_u64(101)
    rng.gen_range(-4711, 17)
    rng.gen_ratio(3, 10)
    random()                 # float from the thread-local engine
"""

__version__ = "0.3.0"

from entropic.core import CryptoRng, RngCore, SeedableRng
from entropic.distributions import Bernoulli, Distribution, Standard, Uniform
from entropic.errors import (
    ErrorKind,
    FatalRandError,
    InvalidProbabilityError,
    InvalidRangeError,
    RandError,
)
from entropic.rng import Rng, as_rng
from entropic.rngs import EntropyRng, SmallRng, StdRng, StepRng, thread_rng
from entropic.rngs.thread import random
from entropic.sources import JitterRng, OsRng, ReadRng

__all__ = [
    "Bernoulli",
    "CryptoRng",
    "Distribution",
    "EntropyRng",
    "ErrorKind",
    "FatalRandError",
    "InvalidProbabilityError",
    "InvalidRangeError",
    "JitterRng",
    "OsRng",
    "RandError",
    "ReadRng",
    "Rng",
    "RngCore",
    "SeedableRng",
    "SmallRng",
    "Standard",
    "StdRng",
    "StepRng",
    "Uniform",
    "__version__",
    "as_rng",
    "random",
    "thread_rng",
]
