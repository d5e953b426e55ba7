"""Bit-source and seeding capabilities.

``RngCore`` is the minimal interface every engine implements: 32-bit and
64-bit integers plus byte filling. ``SeedableRng`` adds construction from
a seed or from another bit source. The helpers at the bottom let an engine
derive the methods it does not implement natively.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from entropic.errors import FatalRandError, RandError

MASK32 = 0xFFFF_FFFF
MASK64 = 0xFFFF_FFFF_FFFF_FFFF


class RngCore(ABC):
    """Source of raw random data.

    Implementations own their state exclusively and are not thread-safe.
    ``fill_bytes`` raises ``FatalRandError`` if the source fails;
    ``try_fill_bytes`` raises the recoverable ``RandError`` instead.
    """

    @abstractmethod
    def next_u32(self) -> int:
        """Return the next 32-bit unsigned integer."""
        ...

    @abstractmethod
    def next_u64(self) -> int:
        """Return the next 64-bit unsigned integer."""
        ...

    @abstractmethod
    def fill_bytes(self, dest) -> None:
        """Fill the writable buffer *dest* with random bytes."""
        ...

    def try_fill_bytes(self, dest) -> None:
        """Fill *dest*, raising ``RandError`` on failure.

        Engines that cannot fail keep this default.
        """
        self.fill_bytes(dest)


class CryptoRng:
    """Marker for engines that claim cryptographic strength."""


class SeedableRng(ABC):
    """Engines constructible from a fixed-size byte seed."""

    #: Length of the seed accepted by ``from_seed``, in bytes.
    SEED_SIZE: int = 32

    @classmethod
    @abstractmethod
    def from_seed(cls, seed: bytes):
        """Create a new engine from exactly ``SEED_SIZE`` bytes."""
        ...

    @classmethod
    def seed_from_u64(cls, state: int):
        """Create a new engine from a 64-bit integer.

        The integer is expanded into ``SEED_SIZE`` bytes with a PCG32
        stream, so nearby integers still give unrelated seeds. Not
        suitable for cryptographic use.
        """
        mul = 6364136223846793005
        inc = 11634580027462260723
        state &= MASK64
        seed = bytearray(cls.SEED_SIZE)
        for off in range(0, cls.SEED_SIZE, 4):
            state = (state * mul + inc) & MASK64
            xorshifted = (((state >> 18) ^ state) >> 27) & MASK32
            rot = state >> 59
            word = ((xorshifted >> rot) | (xorshifted << ((-rot) & 31))) & MASK32
            chunk = word.to_bytes(4, "little")
            seed[off:off + 4] = chunk[: cls.SEED_SIZE - off]
        return cls.from_seed(bytes(seed))

    @classmethod
    def from_rng(cls, rng: RngCore):
        """Create a new engine seeded from another bit source.

        Raises
        ------
        RandError
            If *rng* could not supply the seed.
        """
        seed = bytearray(cls.SEED_SIZE)
        rng.try_fill_bytes(seed)
        return cls.from_seed(bytes(seed))

    @classmethod
    def from_entropy(cls):
        """Create a new engine seeded from fresh system entropy.

        Makes one ``from_rng(EntropyRng())`` call. The entropy chain may
        try its secondary source internally; if every source fails this
        raises ``FatalRandError``. Call ``from_rng`` with an explicit
        source to handle seeding failure.
        """
        from entropic.rngs.entropy import EntropyRng

        try:
            return cls.from_rng(EntropyRng())
        except RandError as err:
            raise FatalRandError(f"{cls.__name__}.from_entropy() failed: {err}") from err


# ── helpers for engine implementations ──


def byte_view(dest) -> memoryview:
    """Return a writable, flat byte view of *dest*."""
    view = memoryview(dest)
    if view.readonly:
        raise TypeError("destination buffer is read-only")
    return view.cast("B") if view.format != "B" or view.ndim != 1 else view


def next_u64_via_u32(rng: RngCore) -> int:
    """Two ``next_u32`` calls, low word first."""
    lo = rng.next_u32()
    hi = rng.next_u32()
    return (hi << 32) | lo


def fill_bytes_via_next(rng: RngCore, dest) -> None:
    """Fill *dest* from ``next_u64`` little-endian words.

    A trailing run of up to four bytes uses a single ``next_u32``; five to
    seven use one more ``next_u64``.
    """
    view = byte_view(dest)
    n = len(view)
    pos = 0
    while n - pos >= 8:
        view[pos:pos + 8] = rng.next_u64().to_bytes(8, "little")
        pos += 8
    left = n - pos
    if left > 4:
        view[pos:] = rng.next_u64().to_bytes(8, "little")[:left]
    elif left > 0:
        view[pos:] = rng.next_u32().to_bytes(4, "little")[:left]


def next_via_fill(rng: RngCore, n_bytes: int) -> int:
    """Read an *n_bytes*-wide little-endian integer through ``fill_bytes``."""
    buf = bytearray(n_bytes)
    rng.fill_bytes(buf)
    return int.from_bytes(buf, "little")
