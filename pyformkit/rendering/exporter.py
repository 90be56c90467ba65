"""
Exporter helpers for form documents -> HTML.

Thin, testable wrappers around FormRenderer used by the CLI and by callers
that keep form layouts in JSON documents.
"""

from __future__ import annotations

import logging
from typing import List

from ..models.document import FieldsetSpec, FormDocument
from ..renderer import FormRenderer
from .page import render_form_page

LOGGER = logging.getLogger(__name__)


def _fieldset(renderer: FormRenderer, spec: FieldsetSpec, return_value: bool):
    return renderer.fieldset(
        spec.legend,
        [control.to_descriptor() for control in spec.controls],
        spec.attributes,
        {**spec.options, "return": return_value},
    )


def render_document(
    document: FormDocument, renderer: FormRenderer, *, page: bool = False
) -> None:
    """Render every fieldset of `document` through the renderer's sink.

    Only markup is written; no trailing newline is added. Without `page` each
    fieldset is emitted as soon as it is rendered; with `page` the fieldsets
    are collected and emitted once, wrapped in a standalone HTML page.
    """
    LOGGER.debug(
        "formkit.export.document title=%s fieldsets=%d page=%s",
        document.title,
        len(document.fieldsets),
        page,
    )
    if not page:
        for spec in document.fieldsets:
            _fieldset(renderer, spec, return_value=False)
        return

    parts: List[str] = []
    for spec in document.fieldsets:
        parts.append(_fieldset(renderer, spec, return_value=True).html)
    renderer.sink.write(
        render_form_page(
            document.title,
            "".join(parts),
            action=document.action,
            method=document.method,
        )
    )
