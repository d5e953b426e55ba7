"""Entropy chain: the primary source with ordered fallbacks."""

from __future__ import annotations

import logging

from entropic.errors import ErrorKind, RandError
from entropic.sources.base import EntropySource
from entropic.sources.system import OsRng
from entropic.sources.timing import JitterRng

logger = logging.getLogger(__name__)


class EntropyRng(EntropySource):
    """Fresh entropy from the first source in a chain that works.

    Each request goes to the sources in order until one succeeds. Nothing
    is remembered between requests, so a source that failed once is
    tried again next time. The default chain is ``OsRng`` then
    ``JitterRng``.

    Meant for seeding other engines, not for bulk output.

    Parameters
    ----------
    sources : list of EntropySource or None
        Chain to consult, primary first.
    """

    name = "entropy"
    description = "OS entropy with clock-jitter fallback"

    def __init__(self, sources: list[EntropySource] | None = None) -> None:
        self.sources = list(sources) if sources is not None else [OsRng(), JitterRng()]
        if not self.sources:
            raise ValueError("EntropyRng needs at least one source")

    def is_available(self) -> bool:
        return any(src.is_available() for src in self.sources)

    def try_fill_bytes(self, dest) -> None:
        last_err: RandError | None = None
        for i, src in enumerate(self.sources):
            try:
                src.try_fill_bytes(dest)
            except RandError as err:
                last_err = err
                if i + 1 < len(self.sources):
                    logger.warning("entropy source %r failed (%s); trying %r",
                                   src.name, err, self.sources[i + 1].name)
                continue
            if i > 0:
                logger.info("entropy supplied by fallback source %r", src.name)
            return
        raise RandError(ErrorKind.UNAVAILABLE, "all entropy sources failed", last_err)
