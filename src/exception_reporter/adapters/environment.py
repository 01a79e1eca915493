"""Process environment probe."""

from __future__ import annotations

import os
from typing import Iterable

from exception_reporter.adapters.request_context import current_request

DEFAULT_ENVIRONMENT = "production"
LOCAL_ENVIRONMENTS = frozenset({"local", "dev", "development", "testing"})


class ProcessEnvironment:
    """EnvironmentProbe for a named deployment.

    The process counts as a console process whenever no request is bound in
    the current context.
    """

    def __init__(self, name: str, local_names: Iterable[str] = LOCAL_ENVIRONMENTS) -> None:
        self._name = name
        self._local_names = frozenset(n.lower() for n in local_names)

    @classmethod
    def from_env(cls, variable: str = "APP_ENV") -> "ProcessEnvironment":
        return cls(os.getenv(variable) or DEFAULT_ENVIRONMENT)

    def is_local(self) -> bool:
        return self._name.lower() in self._local_names

    def environment_name(self) -> str:
        return self._name

    def running_in_console(self) -> bool:
        return current_request() is None
