"""Operating-system entropy source."""

from __future__ import annotations

import os

from entropic.core import CryptoRng
from entropic.errors import ErrorKind, RandError
from entropic.sources.base import EntropySource


class OsRng(EntropySource, CryptoRng):
    """Entropy from the OS CSPRNG via ``os.urandom``.

    May block at early boot until the kernel pool is initialised.
    """

    name = "os"
    description = "Operating system CSPRNG (os.urandom)"
    platform_requirements: list[str] = []

    def is_available(self) -> bool:
        try:
            os.urandom(1)
        except (OSError, NotImplementedError):
            return False
        return True

    def try_fill_bytes(self, dest) -> None:
        view = self._view(dest)
        if len(view) == 0:
            return
        try:
            data = os.urandom(len(view))
        except NotImplementedError as exc:
            raise RandError(ErrorKind.UNAVAILABLE, "no OS random source on this platform", exc) from exc
        except OSError as exc:
            raise RandError(ErrorKind.UNAVAILABLE, "OS random source failed", exc) from exc
        view[:] = data
