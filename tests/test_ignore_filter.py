from __future__ import annotations

from exception_reporter.core.classification import (
    AUTHORIZATION,
    NOT_FOUND,
    VALIDATION,
    ClassificationRegistry,
    build_default_registry,
    qualified_name,
)
from exception_reporter.core.config import NotifierConfig
from exception_reporter.core.errors import (
    AuthenticationError,
    AuthorizationError,
    HttpError,
    HttpResponseError,
    NotFoundError,
    SuspiciousOperationError,
    TokenMismatchError,
    ValidationError,
)
from exception_reporter.core.ignore_filter import should_ignore


class FakeEnvironment:
    def __init__(self, local: bool = False) -> None:
        self._local = local

    def is_local(self) -> bool:
        return self._local

    def environment_name(self) -> str:
        return "local" if self._local else "production"

    def running_in_console(self) -> bool:
        return True


class OrderLookupFailed(NotFoundError):
    pass


class PaymentDeclined(Exception):
    pass


class CardExpired(PaymentDeclined):
    pass


def _config(**kwargs) -> NotifierConfig:
    return NotifierConfig(bot_token="123:abc", chat_id="-100", **kwargs)


def test_default_set_ignores_expected_errors() -> None:
    config = _config()
    production = FakeEnvironment()
    for error in (
        AuthenticationError(),
        AuthorizationError(),
        HttpError(404),
        HttpResponseError(response=object()),
        NotFoundError(),
        TokenMismatchError(),
        ValidationError("bad", {"email": ["required"]}),
        SuspiciousOperationError(),
    ):
        assert should_ignore(error, config, production), type(error).__name__


def test_operational_errors_are_reported() -> None:
    config = _config()
    assert not should_ignore(RuntimeError("db down"), config, FakeEnvironment())
    assert not should_ignore(PaymentDeclined(), config, FakeEnvironment())


def test_subtypes_of_ignored_classes_are_ignored() -> None:
    assert should_ignore(OrderLookupFailed(), _config(), FakeEnvironment())


def test_local_environment_ignores_everything() -> None:
    config = _config(ignored_classifications=frozenset())
    assert should_ignore(RuntimeError("boom"), config, FakeEnvironment(local=True))


def test_type_names_can_be_listed_directly() -> None:
    config = _config(ignored_classifications={qualified_name(PaymentDeclined)})
    assert should_ignore(PaymentDeclined(), config, FakeEnvironment())
    assert should_ignore(CardExpired(), config, FakeEnvironment())
    assert not should_ignore(RuntimeError(), config, FakeEnvironment())


def test_builtin_names_can_be_listed() -> None:
    config = _config(ignored_classifications={"LookupError"})
    assert should_ignore(KeyError("x"), config, FakeEnvironment())


def test_registry_tags_third_party_names_and_parents() -> None:
    registry = ClassificationRegistry()
    registry.register(qualified_name(PaymentDeclined), "billing")
    registry.declare_parent("billing", "customer_facing")
    registry.declare_parent("customer_facing", VALIDATION)

    tags = registry.tags_for(CardExpired())
    assert {"billing", "customer_facing", VALIDATION} <= tags

    config = _config(ignored_classifications={"customer_facing"})
    assert should_ignore(CardExpired(), config, FakeEnvironment(), registry)
    assert not should_ignore(CardExpired(), _config(ignored_classifications={"billing"}), FakeEnvironment())


def test_registry_accepts_classes() -> None:
    registry = ClassificationRegistry()
    registry.register(PaymentDeclined, AUTHORIZATION)
    assert AUTHORIZATION in registry.tags_for(PaymentDeclined())


def test_default_registry_recognizes_framework_names_without_importing_them() -> None:
    registry = build_default_registry()
    Http404 = type("Http404", (Exception,), {"__module__": "django.http.response"})
    assert NOT_FOUND in registry.tags_for(Http404())
