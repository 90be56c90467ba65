"""
Attribute serialization for form controls.

`serialize_attributes` turns a name -> value mapping into the canonical
attribute string placed inside an opening tag. Keys are sorted, empty values
are dropped, and values are emitted verbatim (no HTML escaping). A boolean
attribute whose value equals its own name is written in minimized form
(`selected`); every other attribute keeps `key="value"`.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Dict, Optional

LOGGER = logging.getLogger(__name__)

# Only these collapse to the bare name when their value equals the name.
BOOLEAN_ATTRIBUTES = frozenset(
    {"selected", "multiple", "checked", "disabled", "readonly", "required"}
)


def is_empty_value(value: Any) -> bool:
    """Emptiness predicate: None, False and zero-length strings are absent."""
    if value is None or value is False:
        return True
    return len(_coerce(value)) == 0


def _coerce(value: Any) -> str:
    if value is True:
        return "1"
    if isinstance(value, str):
        return value
    return str(value)


def serialize_attributes(attributes: Optional[Mapping[str, Any]]) -> str:
    if not attributes:
        return ""
    parts = []
    for key in sorted(attributes):
        value = attributes[key]
        if is_empty_value(value):
            continue
        text = _coerce(value)
        if key in BOOLEAN_ATTRIBUTES and text == key:
            parts.append(key)
        else:
            parts.append(f'{key}="{text}"')
    return " ".join(parts)


def open_tag(tag: str, attributes: Optional[Mapping[str, Any]]) -> str:
    """Opening tag; no separating space when every attribute is suppressed."""
    attr_text = serialize_attributes(attributes)
    if attr_text:
        return f"<{tag} {attr_text}>"
    return f"<{tag}>"


def coerce_option_set(value: Any, what: str = "options") -> Dict[str, Any]:
    """Return a shallow dict copy of `value`, or {} when it is not a mapping.

    Omitted (falsy) values map to {} silently; anything else that is not a
    mapping is logged and replaced by {}.
    """
    if isinstance(value, Mapping):
        return dict(value)
    if not value:
        return {}
    LOGGER.warning(
        "formkit.options.malformed what=%s type=%s; using an empty set",
        what,
        type(value).__name__,
    )
    return {}
