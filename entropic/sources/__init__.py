"""Entropy source implementations."""

from entropic.sources.base import EntropySource
from entropic.sources.read import ReadRng
from entropic.sources.system import OsRng
from entropic.sources.timing import JitterRng

# Sources that need no arguments, in order of preference.
ALL_SOURCES: list[type[EntropySource]] = [
    OsRng,
    JitterRng,
]

__all__ = ["ALL_SOURCES", "EntropySource", "JitterRng", "OsRng", "ReadRng"]
