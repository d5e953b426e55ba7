"""Entropy read from a binary stream."""

from __future__ import annotations

from entropic.errors import ErrorKind, RandError
from entropic.sources.base import EntropySource


class ReadRng(EntropySource):
    """Bytes read verbatim from a binary file-like object.

    Useful for replaying recorded entropy or reading a device such as
    ``/dev/hwrng``. Running out of data is an error, not a reason to
    repeat or pad.

    Usage::

        with open("/dev/urandom", "rb") as f:
            rng = ReadRng(f)
            rng.gen_range(0, 10)
    """

    name = "read"
    description = "Bytes read from a binary stream"

    def __init__(self, reader) -> None:
        self.reader = reader

    def is_available(self) -> bool:
        return not getattr(self.reader, "closed", False)

    def try_fill_bytes(self, dest) -> None:
        view = self._view(dest)
        pos = 0
        while pos < len(view):
            try:
                chunk = self.reader.read(len(view) - pos)
            except InterruptedError:
                continue
            except (OSError, ValueError) as exc:
                raise RandError(ErrorKind.UNAVAILABLE, "error reading from stream", exc) from exc
            if chunk is None:
                raise RandError(ErrorKind.NOT_READY, "stream has no data available yet")
            if not chunk:
                raise RandError(ErrorKind.UNAVAILABLE, "end of file reached")
            view[pos:pos + len(chunk)] = chunk
            pos += len(chunk)
