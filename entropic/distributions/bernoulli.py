"""Bernoulli (boolean trial) distribution."""

from __future__ import annotations

from entropic.distributions.base import Distribution
from entropic.distributions.uniform import Uniform
from entropic.errors import InvalidProbabilityError

# p is stored as an integer threshold against a 64-bit draw.
_SCALE = 2.0 ** 64


class Bernoulli(Distribution):
    """``True`` with probability *p*.

    ``Bernoulli(p)`` draws one ``next_u64`` and returns ``draw < p * 2**64``,
    so the smallest representable non-zero probability is ``2**-64``.
    ``Bernoulli.from_ratio(n, d)`` is exact: it draws uniformly from
    ``[0, d)`` and compares against ``n``.

    The certain cases (``p == 0``, ``p == 1``, ``n == 0``, ``n == d``)
    return without drawing anything.
    """

    def __init__(self, p: float) -> None:
        if not (0.0 <= p <= 1.0):
            raise InvalidProbabilityError(f"probability must be in [0, 1], got {p!r}")
        self._p = float(p)
        self._p_int = int(self._p * _SCALE)
        self._ratio: tuple[int, int] | None = None
        self._below: Uniform | None = None

    @classmethod
    def from_ratio(cls, numerator: int, denominator: int) -> Bernoulli:
        """``True`` with probability ``numerator / denominator``, exactly."""
        if denominator <= 0:
            raise InvalidProbabilityError(f"denominator must be positive, got {denominator!r}")
        if not 0 <= numerator <= denominator:
            raise InvalidProbabilityError(
                f"numerator must be in [0, denominator], got {numerator!r}/{denominator!r}"
            )
        obj = cls.__new__(cls)
        obj._p = numerator / denominator
        obj._p_int = None
        obj._ratio = (numerator, denominator)
        obj._below = None
        if 0 < numerator < denominator:
            obj._below = Uniform(0, denominator)
        return obj

    @property
    def p(self) -> float:
        return self._p

    def sample(self, rng) -> bool:
        if self._ratio is not None:
            numerator, denominator = self._ratio
            if numerator == 0:
                return False
            if numerator == denominator:
                return True
            return self._below.sample(rng) < numerator
        if self._p == 0.0:
            return False
        if self._p == 1.0:
            return True
        return rng.next_u64() < self._p_int

    def __repr__(self) -> str:
        if self._ratio is not None:
            return f"Bernoulli.from_ratio({self._ratio[0]}, {self._ratio[1]})"
        return f"Bernoulli(p={self._p!r})"

