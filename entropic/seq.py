"""Sequence helpers: picking and shuffling with any bit source."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence

from entropic.distributions.uniform import sample_single


def choose(values: Sequence, rng):
    """Return a uniformly chosen element, or ``None`` if *values* is empty.

    Draws one index with ``gen_range(0, len(values))``; nothing for an
    empty sequence.
    """
    if len(values) == 0:
        return None
    return values[sample_single(0, len(values), rng)]


def shuffle(values: MutableSequence, rng) -> None:
    """Fisher-Yates shuffle of *values* in place.

    Draws ``len(values) - 1`` indices, from the back of the sequence to
    the front.
    """
    i = len(values)
    while i >= 2:
        j = sample_single(0, i, rng)
        values[i - 1], values[j] = values[j], values[i - 1]
        i -= 1
