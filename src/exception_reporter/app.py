"""Command-line entry point for exception_reporter."""

from __future__ import annotations

import argparse
import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Any, Mapping, Optional

from art import tprint

from exception_reporter.adapters.environment import ProcessEnvironment
from exception_reporter.adapters.request_context import ContextIdentityProbe, ContextRequestProbe
from exception_reporter.adapters.telegram_bot_notifier import NotificationClient
from exception_reporter.adapters.templates import LocalizedTemplateRenderer
from exception_reporter.core.ports import ReportContext
from exception_reporter.settings import Settings, load_settings

NAME = "REPORTER"
FONT = "tarty-1"


def _print_banner() -> None:
    tprint(NAME, FONT, space=1)


class _RedactingFormatter(logging.Formatter):
    def __init__(self, secrets: list[str], fmt: str, datefmt: Optional[str] = None) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)
        self._secrets = [secret for secret in secrets if secret]

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        for secret in self._secrets:
            message = message.replace(secret, "***")
        return message


def _collect_redaction_values(config: Mapping[str, Any], bot_token: str) -> list[str]:
    # The bot token is always masked; extra env vars are opt-in.
    values = [bot_token]
    redact_cfg = config.get("redact", {}) if config else {}
    if redact_cfg.get("enabled", False):
        for name in redact_cfg.get("patterns", []):
            value = os.getenv(name)
            if value:
                values.append(value)
    return sorted(set(values), key=len, reverse=True)


def _configure_logging(config: Mapping[str, Any], bot_token: str, base_dir: Optional[str] = None) -> None:
    if not config.get("enabled", True):
        return

    level_name = str(config.get("level", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)

    fmt = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    datefmt = "%Y-%m-%d %H:%M:%S"
    secrets = _collect_redaction_values(config, bot_token)
    formatter = _RedactingFormatter(secrets, fmt=fmt, datefmt=datefmt)

    handlers: list[logging.Handler] = []

    if config.get("console", True):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    file_cfg = config.get("file", {})
    if file_cfg.get("enabled", False):
        path = file_cfg.get("path", "logs/exception_reporter.log")
        if not os.path.isabs(path) and base_dir:
            path = os.path.join(base_dir, path)
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        max_bytes = int(file_cfg.get("max_bytes", 5 * 1024 * 1024))
        backup_count = int(file_cfg.get("backup_count", 5))
        file_handler = RotatingFileHandler(
            path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if not handlers:
        return

    logging.basicConfig(level=level, handlers=handlers)


def build_notification_client(settings: Settings) -> NotificationClient:
    """Wire a client from loaded settings."""

    context = ReportContext(
        environment=ProcessEnvironment(settings.environment),
        request=ContextRequestProbe(),
        identity=ContextIdentityProbe(),
    )
    renderer = LocalizedTemplateRenderer(settings.templates, locale=settings.notifier.locale)
    return NotificationClient(settings.notifier, context=context, renderer=renderer)


def _check(client: NotificationClient) -> bool:
    try:
        raise RuntimeError("exception-reporter check: this is a test report")
    except RuntimeError as e:
        return client.report_exception(e)


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="exception-reporter")
    parser.add_argument("--config", help="Path to the JSON config file")
    subparsers = parser.add_subparsers(dest="command", required=True)

    send_parser = subparsers.add_parser("send", help="Send a text message to the configured chat")
    send_parser.add_argument("text")
    send_parser.add_argument("--markdown", action="store_true", help="Send with parse_mode=markdown")
    subparsers.add_parser("check", help="Raise and report a sample exception")

    args = parser.parse_args(argv)

    _print_banner()
    settings = load_settings(args.config)
    _configure_logging(settings.logging, settings.notifier.bot_token, settings.config_dir)
    logger = logging.getLogger(__name__)

    client = build_notification_client(settings)
    if args.command == "send":
        delivered = client.send_message(args.text, markdown=args.markdown)
    else:
        delivered = _check(client)

    if delivered:
        logger.info("Delivered to chat %s", settings.notifier.chat_id)
        return 0
    logger.warning("Nothing delivered (ignored, local environment or delivery failure)")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
