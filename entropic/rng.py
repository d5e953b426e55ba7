"""High-level sampling methods shared by every engine.

``Rng`` extends ``RngCore`` with default methods built purely on the four
core methods, so any engine gets them by implementing ``RngCore``. A bare
``RngCore`` from elsewhere can be lifted with ``as_rng``.

Usage::

    from entropic import StdRng

    rng = StdRng.seed_from_u64(7)
    rng.gen(float)          # [0, 1)
    rng.gen_range(1, 7)     # die roll
    rng.gen_bool(0.25)
"""

from __future__ import annotations

import warnings
from collections.abc import Iterator

from entropic import fill as _fill
from entropic import seq
from entropic.core import RngCore
from entropic.distributions import Bernoulli, Distribution, Standard, sample_single


class Rng(RngCore):
    """``RngCore`` plus the generic sampling operations.

    None of these methods report bit-source failure except ``try_fill``;
    if the source fails, ``FatalRandError`` propagates.
    """

    def gen(self, tp=float):
        """Return a value of type spec *tp* from the ``Standard`` distribution."""
        return Standard(tp).sample(self)

    def gen_range(self, low, high, dtype=None):
        """Return a value uniformly distributed over ``[low, high)``.

        Raises
        ------
        InvalidRangeError
            If ``low >= high``. Nothing is drawn in that case.
        """
        return sample_single(low, high, self, dtype)

    def sample(self, distr: Distribution):
        """Sample one value from *distr*."""
        return distr.sample(self)

    def sample_iter(self, distr: Distribution) -> Iterator:
        """Endless iterator over samples of *distr* drawn from this engine."""
        return distr.sample_iter(self)

    def fill(self, dest) -> None:
        """Fill an integer array or buffer with random data.

        Values are read little-endian, so results are the same on every
        platform. Raises ``FatalRandError`` if the source fails.
        """
        _fill.fill(self, dest)

    def try_fill(self, dest) -> None:
        """Like ``fill``, but raises the recoverable ``RandError``."""
        _fill.try_fill(self, dest)

    def gen_bool(self, p: float) -> bool:
        """Return ``True`` with probability *p*.

        Raises ``InvalidProbabilityError`` unless ``0 <= p <= 1``.
        """
        return self.sample(Bernoulli(p))

    def gen_ratio(self, numerator: int, denominator: int) -> bool:
        """Return ``True`` with probability ``numerator / denominator``.

        ``gen_ratio(0, d)`` is always ``False`` and ``gen_ratio(d, d)``
        always ``True``; neither draws from the engine.
        """
        return self.sample(Bernoulli.from_ratio(numerator, denominator))

    def choose(self, values):
        """Deprecated: use ``entropic.seq.choose``."""
        warnings.warn(
            "Rng.choose is deprecated; use entropic.seq.choose",
            DeprecationWarning,
            stacklevel=2,
        )
        return seq.choose(values, self)

    def shuffle(self, values) -> None:
        """Deprecated: use ``entropic.seq.shuffle``."""
        warnings.warn(
            "Rng.shuffle is deprecated; use entropic.seq.shuffle",
            DeprecationWarning,
            stacklevel=2,
        )
        seq.shuffle(values, self)


class _RngAdapter(Rng):
    """Forwards the core methods to a wrapped ``RngCore``."""

    def __init__(self, inner: RngCore) -> None:
        self.inner = inner

    def next_u32(self) -> int:
        return self.inner.next_u32()

    def next_u64(self) -> int:
        return self.inner.next_u64()

    def fill_bytes(self, dest) -> None:
        self.inner.fill_bytes(dest)

    def try_fill_bytes(self, dest) -> None:
        self.inner.try_fill_bytes(dest)

    def __repr__(self) -> str:
        return f"<Rng wrapping {self.inner!r}>"


def as_rng(core: RngCore) -> Rng:
    """Return *core* itself if it is an ``Rng``, else a forwarding wrapper."""
    if isinstance(core, Rng):
        return core
    return _RngAdapter(core)
