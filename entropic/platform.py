"""Platform detection: discover available entropy sources."""

from __future__ import annotations

import logging
import platform as _platform
import sys

from entropic.sources import ALL_SOURCES
from entropic.sources.base import EntropySource

logger = logging.getLogger(__name__)


def detect_available_sources() -> list[EntropySource]:
    """Instantiate and return all sources available on this machine."""
    available: list[EntropySource] = []
    for cls in ALL_SOURCES:
        src = cls()
        if src.is_available():
            available.append(src)
        else:
            logger.debug("entropy source %s unavailable", cls.name)
    return available


def platform_info() -> dict:
    """Return basic platform metadata."""
    return {
        "system": _platform.system(),
        "machine": _platform.machine(),
        "byteorder": sys.byteorder,
        "python": _platform.python_version(),
    }
