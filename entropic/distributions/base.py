"""Abstract base class for all distributions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator


class Distribution(ABC):
    """Maps output of a bit source to a value of some shape.

    A distribution holds only its own parameters. ``sample`` must depend
    on nothing but those parameters and the outputs it draws from *rng*.
    """

    @abstractmethod
    def sample(self, rng):
        """Draw one value using *rng*."""
        ...

    def sample_iter(self, rng) -> Iterator:
        """Endless iterator of samples drawn from *rng*.

        Each call starts a new sequence. Stop advancing it to stop
        drawing; nothing needs closing.
        """
        while True:
            yield self.sample(rng)
