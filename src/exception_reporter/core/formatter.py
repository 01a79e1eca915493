"""Message formatting (core domain).

Template storage and localization belong to the renderer; the core only
assembles the field mapping.
"""

from __future__ import annotations

from exception_reporter.core.models import ExceptionDetails
from exception_reporter.core.ports import TemplateRenderer


def format_details(details: ExceptionDetails, template_id: str, renderer: TemplateRenderer) -> str:
    """Render the report text for ``details`` with the given template."""

    return renderer.render(template_id, details.as_template_fields())
