from __future__ import annotations

import json
import logging

import pytest

from exception_reporter.adapters.templates import DEFAULT_TEMPLATES, LocalizedTemplateRenderer, load_templates
from exception_reporter.core.formatter import format_details
from exception_reporter.core.models import ExceptionDetails


def _details() -> ExceptionDetails:
    return ExceptionDetails(
        message="division by zero",
        source_file="/srv/app/billing.py",
        source_line=42,
        classification="ZeroDivisionError",
        context="https://shop.example/checkout",
        environment="production",
        actor="Alice",
        network_address="10.0.0.5",
    )


def test_default_english_template_includes_every_field() -> None:
    text = format_details(_details(), "telegram.exception", LocalizedTemplateRenderer())
    assert "Exception on production" in text
    assert "Message: division by zero" in text
    assert "Class: ZeroDivisionError" in text
    assert "File: /srv/app/billing.py:42" in text
    assert "URL: https://shop.example/checkout" in text
    assert "User: Alice" in text
    assert "IP: 10.0.0.5" in text


def test_russian_locale() -> None:
    text = format_details(_details(), "telegram.exception", LocalizedTemplateRenderer(locale="ru"))
    assert "Исключение на production" in text
    assert "Пользователь: Alice" in text


def test_unknown_locale_falls_back() -> None:
    text = format_details(_details(), "telegram.exception", LocalizedTemplateRenderer(locale="de"))
    assert text.startswith("⚠️ Exception on production")


def test_sentinel_details_render() -> None:
    text = format_details(ExceptionDetails(), "telegram.exception", LocalizedTemplateRenderer())
    assert "User: N/A" in text
    assert "File: N/A:0" in text


def test_missing_template_renders_its_id(caplog: pytest.LogCaptureFixture) -> None:
    renderer = LocalizedTemplateRenderer({"en": {}})
    with caplog.at_level(logging.WARNING):
        assert renderer.render("telegram.exception", {"message": "x"}) == "telegram.exception"
    assert "No template telegram.exception" in caplog.text


def test_unknown_placeholders_are_kept_and_values_are_not_reparsed() -> None:
    renderer = LocalizedTemplateRenderer({"en": {"t": "{message} / {request_id}"}})
    assert renderer.render("t", {"message": "dict {a} failed"}) == "dict {a} failed / {request_id}"


def test_load_templates_from_json(tmp_path) -> None:
    path = tmp_path / "templates.json"
    path.write_text(json.dumps({"en": {"telegram.exception": "[{env}] {class}: {message}"}}), encoding="utf-8")

    renderer = LocalizedTemplateRenderer(load_templates(str(path)))
    assert format_details(_details(), "telegram.exception", renderer) == (
        "[production] ZeroDivisionError: division by zero"
    )


def test_load_templates_errors(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        load_templates(str(tmp_path / "missing.json"))

    path = tmp_path / "list.json"
    path.write_text("[]", encoding="utf-8")
    with pytest.raises(ValueError):
        load_templates(str(path))


def test_default_templates_cover_both_locales() -> None:
    assert set(DEFAULT_TEMPLATES) == {"en", "ru"}
