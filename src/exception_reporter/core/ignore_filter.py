"""Ignore-list filtering (core domain)."""

from __future__ import annotations

import logging

from exception_reporter.core.classification import ClassificationRegistry, default_registry
from exception_reporter.core.config import NotifierConfig
from exception_reporter.core.ports import EnvironmentProbe

LOGGER = logging.getLogger(__name__)


def should_ignore(
    error: BaseException,
    config: NotifierConfig,
    environment: EnvironmentProbe,
    registry: ClassificationRegistry = default_registry,
) -> bool:
    """Return True when the error must not be reported.

    Local environments never report. Otherwise the error is ignored when any
    of its classification tags is listed in the config; since a type's tags
    include those of its bases, subtypes of a listed type are ignored too.
    """

    if environment.is_local():
        return True

    matched = registry.tags_for(error) & config.ignored_classifications
    if matched:
        LOGGER.debug("Ignoring %s (%s)", type(error).__name__, ", ".join(sorted(matched)))
        return True
    return False
