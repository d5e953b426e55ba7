"""Error types for entropic.

Two tiers:

* ``RandError`` is the recoverable error, raised only by the explicitly
  fallible entry points (``try_fill_bytes``, ``Rng.try_fill``,
  ``SeedableRng.from_rng``).
* ``FatalRandError`` is raised by everything else when the bit source
  fails. It is not meant to be handled; the originating ``RandError`` is
  chained as ``__cause__``.

Precondition violations are programmer errors and raise ``ValueError``
subclasses.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Coarse classification of a bit-source failure."""

    UNAVAILABLE = "unavailable"
    UNEXPECTED = "unexpected"
    TRANSIENT = "transient"
    NOT_READY = "not ready"
    UNSUPPORTED = "unsupported"

    def should_retry(self) -> bool:
        return self in (ErrorKind.TRANSIENT, ErrorKind.NOT_READY)

    def should_wait(self) -> bool:
        return self is ErrorKind.NOT_READY

    @property
    def description(self) -> str:
        return {
            ErrorKind.UNAVAILABLE: "permanently unavailable",
            ErrorKind.UNEXPECTED: "unexpected failure",
            ErrorKind.TRANSIENT: "transient failure",
            ErrorKind.NOT_READY: "not ready yet",
            ErrorKind.UNSUPPORTED: "operation not supported",
        }[self]


class RandError(Exception):
    """Recoverable failure of a bit source or seeding step.

    Parameters
    ----------
    kind : ErrorKind
        Coarse failure kind.
    msg : str
        Human-readable message.
    cause : BaseException or None
        Underlying exception, also set as ``__cause__``.
    """

    def __init__(self, kind: ErrorKind, msg: str, cause: BaseException | None = None) -> None:
        super().__init__(msg)
        self.kind = kind
        self.msg = msg
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        if self.cause is not None:
            return f"{self.msg} ({self.kind.description}); cause: {self.cause}"
        return f"{self.msg} ({self.kind.description})"

    def __repr__(self) -> str:
        return f"RandError(kind={self.kind.name}, msg={self.msg!r})"


class FatalRandError(RuntimeError):
    """A bit source failed inside an operation with no error channel."""


class InvalidRangeError(ValueError):
    """``low >= high`` (or a non-finite bound) passed to a range sampler."""


class InvalidProbabilityError(ValueError):
    """Probability outside [0, 1] or an inconsistent ratio."""
