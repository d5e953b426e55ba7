"""Abstract base class for all entropy sources."""

from abc import abstractmethod

from entropic.core import byte_view, next_via_fill
from entropic.errors import FatalRandError, RandError
from entropic.rng import Rng


class EntropySource(Rng):
    """Base class for a source of environmental entropy.

    Every source declares metadata and implements ``is_available`` and
    ``try_fill_bytes``. The fatal ``fill_bytes`` and the integer methods
    are derived from ``try_fill_bytes``, so a failing source raises
    ``FatalRandError`` from everything except ``try_fill_bytes``.
    """

    name: str = "unnamed"
    description: str = ""
    platform_requirements: list[str] = []

    @abstractmethod
    def is_available(self) -> bool:
        """Return True if the source can operate on this machine."""
        ...

    @abstractmethod
    def try_fill_bytes(self, dest) -> None:
        """Fill *dest* with entropy.

        Raises
        ------
        RandError
            If the source cannot deliver. *dest* may be partly written.
        """
        ...

    def fill_bytes(self, dest) -> None:
        try:
            self.try_fill_bytes(dest)
        except RandError as err:
            raise FatalRandError(f"entropy source {self.name!r} failed: {err}") from err

    def next_u32(self) -> int:
        return next_via_fill(self, 4)

    def next_u64(self) -> int:
        return next_via_fill(self, 8)

    def read(self, n_bytes: int) -> bytes:
        """Return *n_bytes* of entropy, raising ``RandError`` on failure."""
        buf = bytearray(n_bytes)
        self.try_fill_bytes(buf)
        return bytes(buf)

    @staticmethod
    def _view(dest) -> memoryview:
        return byte_view(dest)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
