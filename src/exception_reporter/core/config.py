"""Core configuration dataclasses.

We keep config parsing outside the core, but this dataclass defines the shape
the notifier expects so the settings and app layers can build it safely.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Tuple

from exception_reporter.core.classification import DEFAULT_IGNORED_CLASSIFICATIONS
from exception_reporter.core.errors import ConfigurationError

DEFAULT_BASE_URL = "https://api.telegram.org"
DEFAULT_TIMEOUT_SECONDS = 5.0
# Telegram rejects longer message texts.
DEFAULT_MESSAGE_LIMIT = 4096
DEFAULT_TEMPLATE_ID = "telegram.exception"
OVERFLOW_MARKER = "..."


@dataclass(frozen=True)
class NotifierConfig:
    """Immutable settings owned by a single NotificationClient."""

    bot_token: str
    chat_id: str
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    message_limit: int = DEFAULT_MESSAGE_LIMIT
    ignored_classifications: FrozenSet[str] = DEFAULT_IGNORED_CLASSIFICATIONS
    base_url: str = DEFAULT_BASE_URL
    template_id: str = DEFAULT_TEMPLATE_ID
    locale: str = "en"
    actor_fields: Tuple[str, ...] = ("name",)

    def __post_init__(self) -> None:
        if not self.bot_token:
            raise ConfigurationError("bot_token is required")
        if self.chat_id is None or not str(self.chat_id):
            raise ConfigurationError("chat_id is required")
        if self.timeout_seconds <= 0:
            raise ConfigurationError(f"timeout_seconds must be positive, got {self.timeout_seconds}")
        if self.message_limit <= len(OVERFLOW_MARKER):
            raise ConfigurationError(
                f"message_limit must exceed the overflow marker length ({len(OVERFLOW_MARKER)}), "
                f"got {self.message_limit}"
            )
        # Accept any iterable from callers.
        object.__setattr__(self, "chat_id", str(self.chat_id))
        object.__setattr__(self, "ignored_classifications", frozenset(self.ignored_classifications))
        object.__setattr__(self, "actor_fields", tuple(self.actor_fields))
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))
