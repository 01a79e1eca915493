"""Exception detail extraction (core domain).

Turns an error plus the ambient report context into ExceptionDetails. Every
field falls back to the sentinel, so formatting never sees a missing value.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterable, Optional, Tuple

from exception_reporter.core.classification import qualified_name
from exception_reporter.core.models import SENTINEL, ExceptionDetails
from exception_reporter.core.ports import ReportContext

CONSOLE_CONTEXT = "CLI"


def _or_sentinel(value: Any) -> str:
    if value is None:
        return SENTINEL
    text = str(value).strip()
    return text or SENTINEL


def error_message(error: BaseException) -> str:
    """Return the error's own text, without the repr quoting KeyError adds."""

    if len(error.args) == 1 and isinstance(error.args[0], str):
        return _or_sentinel(error.args[0])
    return _or_sentinel(str(error))


def source_location(error: BaseException) -> Tuple[str, int]:
    """Return the file and line where the error was raised."""

    tb = error.__traceback__
    if tb is None:
        return SENTINEL, 0
    while tb.tb_next is not None:
        tb = tb.tb_next
    return tb.tb_frame.f_code.co_filename or SENTINEL, tb.tb_lineno or 0


def resolve_actor_name(actor: Optional[Any], fields: Iterable[str] = ("name",)) -> str:
    """Name the actor: ``get_name()`` first, then each field, then the sentinel."""

    if actor is None:
        return SENTINEL

    get_name = getattr(actor, "get_name", None)
    if callable(get_name):
        return _or_sentinel(get_name())

    for key in fields:
        if isinstance(actor, Mapping):
            value = actor.get(key)
        else:
            value = getattr(actor, key, None)
        if value:
            return _or_sentinel(value)
    return SENTINEL


def extract_details(
    error: BaseException,
    context: ReportContext,
    actor_fields: Iterable[str] = ("name",),
) -> ExceptionDetails:
    """Build the details of one report. Has no side effects."""

    source_file, source_line = source_location(error)

    if context.environment.running_in_console():
        request_context = CONSOLE_CONTEXT
    else:
        request_context = _or_sentinel(context.request.full_url())

    return ExceptionDetails(
        message=error_message(error),
        source_file=source_file,
        source_line=source_line,
        classification=qualified_name(type(error)),
        context=request_context,
        environment=_or_sentinel(context.environment.environment_name()),
        actor=resolve_actor_name(context.identity.current_actor(), actor_fields),
        network_address=_or_sentinel(context.request.server_address(SENTINEL)),
    )
