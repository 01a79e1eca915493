"""Configuration loading for exception_reporter.

Secrets (bot token, chat id) come from the environment via python-dotenv so
they stay out of the repo. Tunables live in an optional JSON file:

    {
      "notifications": {
        "timeout_seconds": 5,
        "message_limit": 4096,
        "ignored_classifications": ["validation", "not_found"],
        "locale": "ru",
        "templates_path": "templates.json"
      },
      "logging": {"enabled": true, "level": "INFO"}
    }
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from dotenv import load_dotenv

from exception_reporter.adapters.environment import DEFAULT_ENVIRONMENT
from exception_reporter.adapters.templates import DEFAULT_TEMPLATES, load_templates
from exception_reporter.core.config import NotifierConfig
from exception_reporter.core.errors import ConfigurationError

CONFIG_ENV_VAR = "EXCEPTION_REPORTER_CONFIG"


@dataclass(frozen=True)
class Settings:
    notifier: NotifierConfig
    environment: str
    templates: Mapping[str, Mapping[str, str]] = field(default_factory=lambda: DEFAULT_TEMPLATES)
    logging: Mapping[str, Any] = field(default_factory=dict)
    # Relative paths in the config file resolve against its directory.
    config_dir: Optional[str] = None


def _load_json_config(path: Optional[str]) -> dict:
    """Load the JSON config; no path or a missing default file means defaults."""

    explicit = path is not None
    path = path or os.getenv(CONFIG_ENV_VAR)
    if not path:
        return {}

    if not os.path.exists(path):
        if explicit:
            raise FileNotFoundError(f"Config file not found: {path}")
        return {}

    with open(path, "r", encoding="utf-8") as handle:
        return json.load(handle)


def build_notifier_config(bot_token: str, chat_id: str, notifications: Mapping[str, Any]) -> NotifierConfig:
    """Build NotifierConfig, letting JSON override only the keys it names."""

    overrides: dict[str, Any] = {}
    if "timeout_seconds" in notifications:
        overrides["timeout_seconds"] = float(notifications["timeout_seconds"])
    if "message_limit" in notifications:
        overrides["message_limit"] = int(notifications["message_limit"])
    if "ignored_classifications" in notifications:
        overrides["ignored_classifications"] = frozenset(notifications["ignored_classifications"] or [])
    if "actor_fields" in notifications:
        overrides["actor_fields"] = tuple(notifications["actor_fields"])
    for key in ("base_url", "template_id", "locale"):
        if notifications.get(key):
            overrides[key] = str(notifications[key])

    return NotifierConfig(bot_token=bot_token, chat_id=chat_id, **overrides)


def load_settings(path: Optional[str] = None) -> Settings:
    """Read .env/environment secrets and the optional JSON config."""

    load_dotenv()

    bot_token = (os.getenv("TELEGRAM_BOT_TOKEN") or "").strip()
    chat_id = (os.getenv("TELEGRAM_CHAT_ID") or "").strip()

    # Fail fast on missing credentials instead of silently never reporting.
    if not bot_token or not chat_id:
        raise ConfigurationError("Missing TELEGRAM_BOT_TOKEN or TELEGRAM_CHAT_ID in environment")

    raw = _load_json_config(path)
    config_path = path or os.getenv(CONFIG_ENV_VAR)
    config_dir = os.path.dirname(os.path.abspath(config_path)) if config_path else None
    if not isinstance(raw, dict):
        raise ConfigurationError("Config file must hold a JSON object")
    notifications = raw.get("notifications") or {}
    logging_config = raw.get("logging") or {}
    if not isinstance(notifications, dict) or not isinstance(logging_config, dict):
        raise ConfigurationError("\"notifications\" and \"logging\" must be JSON objects")

    templates: Mapping[str, Mapping[str, str]] = DEFAULT_TEMPLATES
    templates_path = notifications.get("templates_path")
    if templates_path:
        if not os.path.isabs(templates_path) and config_dir:
            templates_path = os.path.join(config_dir, templates_path)
        templates = load_templates(templates_path)

    return Settings(
        notifier=build_notifier_config(bot_token, chat_id, notifications),
        environment=os.getenv("APP_ENV") or DEFAULT_ENVIRONMENT,
        templates=templates,
        logging=logging_config,
        config_dir=config_dir,
    )
