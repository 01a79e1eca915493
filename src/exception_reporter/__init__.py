"""Report unhandled exceptions to a Telegram chat through a bot.

Example:
    >>> from exception_reporter import NotificationClient, NotifierConfig
    >>> client = NotificationClient(NotifierConfig(bot_token="123:abc", chat_id="-10042"))
    >>> try:
    ...     1 / 0
    ... except ZeroDivisionError as e:
    ...     client.report_exception(e)
"""

from exception_reporter.adapters.request_context import bind_actor, bind_request
from exception_reporter.adapters.telegram_bot_notifier import NotificationClient
from exception_reporter.core.classification import (
    DEFAULT_IGNORED_CLASSIFICATIONS,
    ClassificationRegistry,
    default_registry,
)
from exception_reporter.core.config import NotifierConfig
from exception_reporter.core.errors import ConfigurationError
from exception_reporter.core.models import SENTINEL, ExceptionDetails
from exception_reporter.core.truncate import truncate
from exception_reporter.hooks import install_excepthook, report_errors

__version__ = "0.1.0"

__all__ = [
    "NotificationClient",
    "NotifierConfig",
    "ConfigurationError",
    "ExceptionDetails",
    "SENTINEL",
    "ClassificationRegistry",
    "DEFAULT_IGNORED_CLASSIFICATIONS",
    "default_registry",
    "truncate",
    "bind_request",
    "bind_actor",
    "install_excepthook",
    "report_errors",
    "__version__",
]
