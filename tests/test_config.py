from __future__ import annotations

import pytest

from exception_reporter.core.classification import DEFAULT_IGNORED_CLASSIFICATIONS
from exception_reporter.core.config import NotifierConfig
from exception_reporter.core.errors import ConfigurationError


def test_defaults() -> None:
    config = NotifierConfig(bot_token="123:abc", chat_id="-100")
    assert config.timeout_seconds == 5
    assert config.message_limit == 4096
    assert config.base_url == "https://api.telegram.org"
    assert config.ignored_classifications == DEFAULT_IGNORED_CLASSIFICATIONS


def test_normalizes_collections_and_chat_id() -> None:
    config = NotifierConfig(
        bot_token="123:abc",
        chat_id=42,  # type: ignore[arg-type]
        ignored_classifications=["validation", "validation"],  # type: ignore[arg-type]
        actor_fields=["full_name"],  # type: ignore[arg-type]
        base_url="https://example.test/",
    )
    assert config.chat_id == "42"
    assert config.ignored_classifications == frozenset({"validation"})
    assert config.actor_fields == ("full_name",)
    assert config.base_url == "https://example.test"


@pytest.mark.parametrize("limit", [0, 3])
def test_message_limit_must_exceed_marker(limit: int) -> None:
    with pytest.raises(ConfigurationError):
        NotifierConfig(bot_token="123:abc", chat_id="-100", message_limit=limit)


def test_rejects_missing_credentials_and_bad_timeout() -> None:
    with pytest.raises(ConfigurationError):
        NotifierConfig(bot_token="", chat_id="-100")
    with pytest.raises(ConfigurationError):
        NotifierConfig(bot_token="123:abc", chat_id="")
    with pytest.raises(ConfigurationError):
        NotifierConfig(bot_token="123:abc", chat_id="-100", timeout_seconds=0)


def test_is_immutable() -> None:
    config = NotifierConfig(bot_token="123:abc", chat_id="-100")
    with pytest.raises(AttributeError):
        config.message_limit = 10  # type: ignore[misc]
