"""Classification tags and the registry that resolves them.

An error's classification set is the union of:
- the qualified names of its type and every base type,
- tags declared on those types through ``classification_tags``,
- tags registered here for third-party type names,
- the parents of any of the above, expanded transitively.

Third-party types are registered by dotted name so frameworks never have to be
imported just to be recognized.
"""

from __future__ import annotations

from typing import Iterable, Union

AUTHENTICATION = "authentication"
AUTHORIZATION = "authorization"
HTTP = "http"
HTTP_RESPONSE = "http_response"
NOT_FOUND = "not_found"
TOKEN_MISMATCH = "token_mismatch"
VALIDATION = "validation"
SUSPICIOUS_OPERATION = "suspicious_operation"

DEFAULT_IGNORED_CLASSIFICATIONS = frozenset(
    {
        AUTHENTICATION,
        AUTHORIZATION,
        HTTP,
        HTTP_RESPONSE,
        NOT_FOUND,
        TOKEN_MISMATCH,
        VALIDATION,
        SUSPICIOUS_OPERATION,
    }
)


def qualified_name(error_type: type) -> str:
    """Return ``module.QualName``, or the bare name for builtins."""

    module = getattr(error_type, "__module__", None)
    if not module or module == "builtins":
        return error_type.__qualname__
    return f"{module}.{error_type.__qualname__}"


class ClassificationRegistry:
    """Maps error types to classification tags."""

    def __init__(self) -> None:
        self._by_name: dict[str, set[str]] = {}
        self._parents: dict[str, set[str]] = {}

    def register(self, error_type: Union[type, str], *tags: str) -> None:
        """Attach tags to a type, given as a class or a dotted name."""

        name = error_type if isinstance(error_type, str) else qualified_name(error_type)
        self._by_name.setdefault(name, set()).update(tags)

    def declare_parent(self, tag: str, *parents: str) -> None:
        """Make every error tagged ``tag`` also satisfy ``parents``."""

        self._parents.setdefault(tag, set()).update(parents)

    def tags_for(self, error: BaseException) -> frozenset[str]:
        """Resolve the full classification set of an error instance."""

        found: set[str] = set()
        for klass in type(error).__mro__:
            if klass is object:
                continue
            name = qualified_name(klass)
            found.add(name)
            found.update(self._by_name.get(name, ()))
            # Only the class's own declaration; inherited ones are picked up
            # when the walk reaches the declaring base.
            found.update(klass.__dict__.get("classification_tags", ()))
        return frozenset(self._expand(found))

    def _expand(self, tags: Iterable[str]) -> set[str]:
        pending = list(tags)
        expanded: set[str] = set()
        while pending:
            tag = pending.pop()
            if tag in expanded:
                continue
            expanded.add(tag)
            pending.extend(self._parents.get(tag, ()))
        return expanded


# Well-known framework exceptions that the host already turns into an error
# response for the end user.
_FRAMEWORK_TAGS: dict[str, tuple[str, ...]] = {
    AUTHENTICATION: (
        "rest_framework.exceptions.AuthenticationFailed",
        "rest_framework.exceptions.NotAuthenticated",
        "werkzeug.exceptions.Unauthorized",
    ),
    AUTHORIZATION: (
        "django.core.exceptions.PermissionDenied",
        "rest_framework.exceptions.PermissionDenied",
        "werkzeug.exceptions.Forbidden",
    ),
    HTTP: (
        "werkzeug.exceptions.HTTPException",
        "starlette.exceptions.HTTPException",
        "rest_framework.exceptions.APIException",
    ),
    NOT_FOUND: (
        "django.http.response.Http404",
        "django.core.exceptions.ObjectDoesNotExist",
        "sqlalchemy.exc.NoResultFound",
        "sqlalchemy.orm.exc.NoResultFound",
    ),
    TOKEN_MISMATCH: ("flask_wtf.csrf.CSRFError",),
    VALIDATION: (
        "django.core.exceptions.ValidationError",
        "pydantic_core._pydantic_core.ValidationError",
        "fastapi.exceptions.RequestValidationError",
    ),
    SUSPICIOUS_OPERATION: (
        "django.core.exceptions.SuspiciousOperation",
        "django.core.exceptions.DisallowedHost",
    ),
}


def build_default_registry() -> ClassificationRegistry:
    registry = ClassificationRegistry()
    for tag, names in _FRAMEWORK_TAGS.items():
        for name in names:
            registry.register(name, tag)
    return registry


default_registry = build_default_registry()
