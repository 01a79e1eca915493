"""Length bounding for outgoing message text."""

from __future__ import annotations

from exception_reporter.core.config import OVERFLOW_MARKER
from exception_reporter.core.errors import ConfigurationError


def truncate(text: str, limit: int, marker: str = OVERFLOW_MARKER) -> str:
    """Bound ``text`` to ``limit`` characters, ending cut text with ``marker``.

    Space for the marker is always reserved, so a truncated result is exactly
    ``limit`` characters long.
    """

    if limit < len(marker):
        raise ConfigurationError(f"limit {limit} is shorter than the overflow marker {marker!r}")
    if len(text) <= limit:
        return text
    return text[: limit - len(marker)] + marker
