"""Hooks that route unhandled errors of the host process to a client."""

from __future__ import annotations

import sys
import threading
from contextlib import contextmanager
from typing import Callable, Iterator

from exception_reporter.adapters.telegram_bot_notifier import NotificationClient


def install_excepthook(client: NotificationClient) -> Callable[[], None]:
    """Report uncaught exceptions from the main thread and worker threads.

    The previously installed hooks still run afterwards, so tracebacks keep
    reaching stderr. KeyboardInterrupt and SystemExit are not reported.
    Returns a callable that restores the previous hooks.
    """

    previous_hook = sys.excepthook
    previous_thread_hook = threading.excepthook

    def _hook(exc_type, exc_value, exc_traceback) -> None:
        if issubclass(exc_type, Exception):
            client.report_exception(exc_value)
        previous_hook(exc_type, exc_value, exc_traceback)

    def _thread_hook(args) -> None:
        if args.exc_value is not None and issubclass(args.exc_type, Exception):
            client.report_exception(args.exc_value)
        previous_thread_hook(args)

    sys.excepthook = _hook
    threading.excepthook = _thread_hook

    def uninstall() -> None:
        sys.excepthook = previous_hook
        threading.excepthook = previous_thread_hook

    return uninstall


@contextmanager
def report_errors(client: NotificationClient) -> Iterator[NotificationClient]:
    """Report an exception escaping the block, then re-raise it."""

    try:
        yield client
    except Exception as e:
        client.report_exception(e)
        raise
