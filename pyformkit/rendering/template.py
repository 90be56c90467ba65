"""Placeholder substitution for control output templates."""

from __future__ import annotations

import re
from typing import Any, Mapping, Optional

PLACEHOLDER_PREFIX = ":"


def _token(name: str) -> str:
    return name if name.startswith(PLACEHOLDER_PREFIX) else PLACEHOLDER_PREFIX + name


def format_template(
    template: Optional[str], placeholders: Mapping[str, Any], element: str = ""
) -> str:
    """Replace placeholder tokens in `template` in one simultaneous pass.

    Replacement values are never rescanned, so a value containing another
    token is emitted verbatim. Tokens with no entry in `placeholders` are
    left as they are. When `template` is empty, `element` is returned as is.
    """
    if not template:
        return element
    values = {
        _token(name): "" if value is None else str(value)
        for name, value in placeholders.items()
    }
    if not values:
        return template
    # Longest first so ":value" never shadows a longer token sharing its prefix.
    pattern = re.compile(
        "|".join(re.escape(t) for t in sorted(values, key=len, reverse=True))
    )
    return pattern.sub(lambda m: values[m.group(0)], template)
