"""Core domain models.

These dataclasses are shared across the core and adapters to avoid tight
coupling to any framework-specific types.
"""

from __future__ import annotations

from dataclasses import dataclass

SENTINEL = "N/A"


@dataclass(frozen=True)
class ExceptionDetails:
    """Everything a report says about one error, sentinel-filled."""

    message: str = SENTINEL
    source_file: str = SENTINEL
    source_line: int = 0
    classification: str = SENTINEL
    context: str = SENTINEL
    environment: str = SENTINEL
    actor: str = SENTINEL
    network_address: str = SENTINEL

    def as_template_fields(self) -> dict[str, object]:
        """Return the placeholder mapping used by message templates."""

        return {
            "message": self.message,
            "file": self.source_file,
            "line": self.source_line,
            "class": self.classification,
            "url": self.context,
            "env": self.environment,
            "user": self.actor,
            "ip": self.network_address,
        }
