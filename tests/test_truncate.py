from __future__ import annotations

import pytest

from exception_reporter.core.errors import ConfigurationError
from exception_reporter.core.truncate import truncate


def test_short_text_is_returned_unchanged() -> None:
    assert truncate("hello", 10, "...") == "hello"
    assert truncate("0123456789", 10, "...") == "0123456789"


def test_long_text_reserves_space_for_marker() -> None:
    result = truncate("0123456789ABC", 10, "...")
    assert result == "0123456..."
    assert len(result) == 10


def test_result_never_exceeds_limit() -> None:
    text = "x" * 500
    for limit in (4, 5, 17, 499, 500):
        result = truncate(text, limit, "...")
        assert len(result) <= limit
        if limit < len(text):
            assert result.endswith("...")


def test_counts_characters_not_bytes() -> None:
    text = "привет, мир"
    assert truncate(text, 11) == text
    assert truncate(text, 8) == "приве..."


def test_limit_equal_to_marker_keeps_only_marker() -> None:
    assert truncate("abcdef", 3, "...") == "..."


def test_limit_shorter_than_marker_is_a_configuration_error() -> None:
    with pytest.raises(ConfigurationError):
        truncate("abcdef", 2, "...")
