"""Telegram Bot API notification client.

Every call makes at most one blocking ``sendMessage`` request. Delivery
problems are logged and reported as ``False``; they never raise into the host
application, whose own error handling is already running when we are called.
"""

from __future__ import annotations

import json
import logging
import time
from typing import Optional

from exception_reporter.adapters.environment import ProcessEnvironment
from exception_reporter.adapters.http_transport import UrllibTransport
from exception_reporter.adapters.request_context import ContextIdentityProbe, ContextRequestProbe
from exception_reporter.adapters.templates import LocalizedTemplateRenderer
from exception_reporter.core.classification import ClassificationRegistry, default_registry
from exception_reporter.core.config import OVERFLOW_MARKER, NotifierConfig
from exception_reporter.core.extractor import extract_details
from exception_reporter.core.formatter import format_details
from exception_reporter.core.ignore_filter import should_ignore
from exception_reporter.core.ports import HttpTransport, ReportContext, TemplateRenderer
from exception_reporter.core.truncate import truncate

LOGGER = logging.getLogger(__name__)

SEND_MESSAGE = "sendMessage"


def default_context() -> ReportContext:
    """Context backed by APP_ENV and the contextvars request/actor bindings."""

    return ReportContext(
        environment=ProcessEnvironment.from_env(),
        request=ContextRequestProbe(),
        identity=ContextIdentityProbe(),
    )


def is_ok_response(body: bytes, logger: logging.Logger = LOGGER) -> bool:
    """Return True only for a JSON object whose ``ok`` is exactly ``true``."""

    try:
        payload = json.loads(body)
    except (ValueError, RecursionError):
        logger.error("Bot API returned a non-JSON body: %r", body[:200])
        return False

    if not isinstance(payload, dict):
        logger.error("Bot API returned an unexpected body: %r", payload)
        return False

    if payload.get("ok") is True:
        return True

    logger.error("Bot API rejected the message: %s", payload.get("description", payload))
    return False


class NotificationClient:
    """Sends texts and exception reports to one chat through a bot."""

    def __init__(
        self,
        config: NotifierConfig,
        *,
        transport: Optional[HttpTransport] = None,
        context: Optional[ReportContext] = None,
        renderer: Optional[TemplateRenderer] = None,
        registry: ClassificationRegistry = default_registry,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._config = config
        self._transport = transport or UrllibTransport()
        self._context = context or default_context()
        self._renderer = renderer or LocalizedTemplateRenderer(locale=config.locale)
        self._registry = registry
        self._logger = logger or LOGGER

    @property
    def config(self) -> NotifierConfig:
        return self._config

    def url(self, method: str) -> str:
        # The Bot API endpoint is deterministic and derived from the token.
        return f"{self._config.base_url}/bot{self._config.bot_token}/{method}"

    def report_exception(self, error: BaseException, context: Optional[ReportContext] = None) -> bool:
        """Report ``error`` unless it is filtered out. Never raises."""

        context = context or self._context
        try:
            if should_ignore(error, self._config, context.environment, self._registry):
                return False
            details = extract_details(error, context, self._config.actor_fields)
            text = format_details(details, self._config.template_id, self._renderer)
        except Exception:
            self._logger.exception("Failed to build report for %s", type(error).__name__)
            return False

        return self.send_message(text)

    def send_message(self, text: str, markdown: bool = False) -> bool:
        """Send ``text`` to the configured chat and return whether it was accepted."""

        start = time.perf_counter()
        try:
            fields = {
                "chat_id": self._config.chat_id,
                "text": truncate(str(text), self._config.message_limit, OVERFLOW_MARKER),
            }
            if markdown:
                fields["parse_mode"] = "markdown"

            response = self._transport.post_form(
                self.url(SEND_MESSAGE),
                fields,
                timeout=self._config.timeout_seconds,
            )
            delivered = is_ok_response(response.body, self._logger)
        except Exception as e:
            self._logger.error("Failed to send message: %s", e)
            return False

        if delivered:
            elapsed = time.perf_counter() - start
            self._logger.info("Message sent in %.4f seconds", elapsed)
        return delivered
