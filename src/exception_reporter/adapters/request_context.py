"""Request and actor context bound per execution context.

Hosts bind the request being served and the authenticated actor with the
context managers below; ``contextvars`` keeps concurrent requests (threads or
asyncio tasks) from seeing each other's values.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any, Iterator, Optional


@dataclass(frozen=True)
class RequestInfo:
    url: str
    server_address: Optional[str] = None


_REQUEST: ContextVar[Optional[RequestInfo]] = ContextVar("exception_reporter_request", default=None)
_ACTOR: ContextVar[Optional[Any]] = ContextVar("exception_reporter_actor", default=None)


def current_request() -> Optional[RequestInfo]:
    return _REQUEST.get()


@contextmanager
def bind_request(url: str, server_address: Optional[str] = None) -> Iterator[RequestInfo]:
    """Mark the enclosed code as serving ``url``."""

    info = RequestInfo(url=url, server_address=server_address)
    token = _REQUEST.set(info)
    try:
        yield info
    finally:
        _REQUEST.reset(token)


@contextmanager
def bind_actor(actor: Any) -> Iterator[Any]:
    """Make ``actor`` the current actor for the enclosed code."""

    token = _ACTOR.set(actor)
    try:
        yield actor
    finally:
        _ACTOR.reset(token)


class ContextRequestProbe:
    """RequestProbe reading the request bound with ``bind_request``."""

    def full_url(self) -> Optional[str]:
        info = _REQUEST.get()
        return info.url if info else None

    def server_address(self, default: str) -> str:
        info = _REQUEST.get()
        if info is None or not info.server_address:
            return default
        return info.server_address


class ContextIdentityProbe:
    """IdentityProbe reading the actor bound with ``bind_actor``."""

    def current_actor(self) -> Optional[Any]:
        return _ACTOR.get()
