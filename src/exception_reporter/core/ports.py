"""Ports (interfaces) used by the core.

Ports define the minimal contracts for the host application and the HTTP
layer so that the core can be reused with different frameworks and
transports.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Protocol


class EnvironmentProbe(Protocol):
    """Deployment facts about the running process."""

    def is_local(self) -> bool:
        ...

    def environment_name(self) -> str:
        ...

    def running_in_console(self) -> bool:
        ...


class RequestProbe(Protocol):
    """The request currently being served, if any."""

    def full_url(self) -> Optional[str]:
        ...

    def server_address(self, default: str) -> str:
        ...


class IdentityProbe(Protocol):
    """The authenticated actor, if any."""

    def current_actor(self) -> Optional[Any]:
        ...


class TemplateRenderer(Protocol):
    def render(self, template_id: str, fields: Mapping[str, object]) -> str:
        ...


@dataclass(frozen=True)
class HttpResponse:
    status: int
    body: bytes


class HttpTransport(Protocol):
    """Blocking form POST used for bot API calls."""

    def post_form(self, url: str, fields: Mapping[str, str], timeout: float) -> HttpResponse:
        ...


@dataclass(frozen=True)
class ReportContext:
    """Ambient sources passed explicitly into extraction and filtering."""

    environment: EnvironmentProbe
    request: RequestProbe
    identity: IdentityProbe
