"""
Builtin per-kind defaults and the defaults merger.

A default only applies when its key is entirely absent from the caller's
values; a key that is present, even with an empty value, always wins.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict, Mapping

INPUT_ATTRIBUTE_DEFAULTS: Mapping[str, Any] = MappingProxyType(
    {"type": "text", "id": "", "value": ""}
)
TEXTAREA_ATTRIBUTE_DEFAULTS: Mapping[str, Any] = MappingProxyType({"id": ""})
SELECT_ATTRIBUTE_DEFAULTS: Mapping[str, Any] = MappingProxyType({"id": ""})

SELECT_OPTION_DEFAULTS: Mapping[str, Any] = MappingProxyType(
    {
        "default": "",
        "options": {},
        "html_before": "",
        "html_after": "",
        "selected": "",
    }
)
WRAP_OPTION_DEFAULTS: Mapping[str, Any] = MappingProxyType(
    {"in": "div", "html_before": "", "html_after": ""}
)


def merge_defaults(
    defaults: Mapping[str, Any], overrides: Mapping[str, Any]
) -> Dict[str, Any]:
    # Shallow: nested values are replaced, never merged.
    merged = dict(defaults)
    merged.update(overrides)
    return merged
