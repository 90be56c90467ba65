"""
Module-level helpers backed by a shared default FormRenderer.

These mirror the FormRenderer methods but return the fragment's HTML as a
plain string when the `return` option is set, and None after writing to the
default sink (stdout) otherwise.

Example:

    >>> from pyformkit import api
    >>> api.input("my_txt", {"id": "my_txt_1"}, {"return": True})
    '<input id="my_txt_1" name="my_txt" type="text">'
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterable, Optional

from .rendering.fragment import Fragment
from .renderer import AttributeMap, FormRenderer, OptionSet

_default_renderer: Optional[FormRenderer] = None


def default_renderer() -> FormRenderer:
    global _default_renderer
    if _default_renderer is None:
        _default_renderer = FormRenderer()
    return _default_renderer


def set_default_renderer(renderer: Optional[FormRenderer]) -> None:
    """Replace the shared renderer (None restores a fresh default on next use)."""
    global _default_renderer
    _default_renderer = renderer


def _text(fragment: Optional[Fragment]) -> Optional[str]:
    return None if fragment is None else fragment.html


def input(
    name: str, attributes: AttributeMap = None, options: OptionSet = None
) -> Optional[str]:
    return _text(default_renderer().input(name, attributes, options))


def textarea(
    name: str, attributes: AttributeMap = None, options: OptionSet = None
) -> Optional[str]:
    return _text(default_renderer().textarea(name, attributes, options))


def select(
    name: str, attributes: AttributeMap = None, options: OptionSet = None
) -> Optional[str]:
    return _text(default_renderer().select(name, attributes, options))


def wrap(
    content: str = "", attributes: AttributeMap = None, options: OptionSet = None
) -> Optional[str]:
    return _text(default_renderer().wrap(content, attributes, options))


def fieldset(
    legend: Optional[str],
    controls: Iterable[Any] = (),
    attributes: AttributeMap = None,
    options: OptionSet = None,
) -> Optional[str]:
    return _text(default_renderer().fieldset(legend, controls, attributes, options))


def get_var(name: str, mapping: Any, default: Any = None) -> Any:
    """Return `mapping[name]`, or `default` when the key or mapping is missing."""
    if isinstance(mapping, Mapping) and name in mapping:
        return mapping[name]
    return default
