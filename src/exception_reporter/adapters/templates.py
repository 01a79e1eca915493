"""Localized message templates.

Templates live in a ``{locale: {template_id: text}}`` mapping so operators can
ship their own wording as JSON without touching Python. Placeholders use
``str.format`` syntax; unknown placeholders are left as written.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Mapping

LOGGER = logging.getLogger(__name__)

DEFAULT_TEMPLATES: dict[str, dict[str, str]] = {
    "en": {
        "telegram.exception": (
            "⚠️ Exception on {env}\n"
            "\n"
            "Message: {message}\n"
            "Class: {class}\n"
            "File: {file}:{line}\n"
            "URL: {url}\n"
            "User: {user}\n"
            "IP: {ip}"
        ),
    },
    "ru": {
        "telegram.exception": (
            "⚠️ Исключение на {env}\n"
            "\n"
            "Сообщение: {message}\n"
            "Класс: {class}\n"
            "Файл: {file}:{line}\n"
            "URL: {url}\n"
            "Пользователь: {user}\n"
            "IP: {ip}"
        ),
    },
}


class _KeepMissing(dict):
    def __missing__(self, key: str) -> str:
        return "{" + key + "}"


def load_templates(path: str) -> dict[str, dict[str, str]]:
    """Load templates from a JSON file with the same shape as the defaults."""

    if not os.path.exists(path):
        raise FileNotFoundError(f"Templates file not found: {path}")

    with open(path, "r", encoding="utf-8") as handle:
        raw = json.load(handle)

    if not isinstance(raw, dict):
        raise ValueError(f"Templates file must hold an object keyed by locale: {path}")
    return {str(locale): {str(k): str(v) for k, v in entries.items()} for locale, entries in raw.items()}


class LocalizedTemplateRenderer:
    """TemplateRenderer over an in-memory template table."""

    def __init__(
        self,
        templates: Mapping[str, Mapping[str, str]] = DEFAULT_TEMPLATES,
        locale: str = "en",
        fallback_locale: str = "en",
    ) -> None:
        self._templates = templates
        self._locale = locale
        self._fallback_locale = fallback_locale

    def _lookup(self, template_id: str) -> "str | None":
        for locale in (self._locale, self._fallback_locale):
            template = self._templates.get(locale, {}).get(template_id)
            if template is not None:
                return template
        return None

    def render(self, template_id: str, fields: Mapping[str, object]) -> str:
        template = self._lookup(template_id)
        if template is None:
            # Same outcome as an untranslated key: the id itself.
            LOGGER.warning("No template %s for locale %s", template_id, self._locale)
            return template_id
        return template.format_map(_KeepMissing(fields))
