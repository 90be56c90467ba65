"""
Render configuration for form controls.

Centralizes behavior flags and collaborators so callers can tune defaults
without touching core logic. Per-call options always take precedence over
these values.
"""

from __future__ import annotations

import logging
import random
import re
from dataclasses import dataclass, field, fields
from typing import Any, Mapping, Tuple

from .widgets import ColorPickerScriptEnqueuer, PlainTextEditor
from .widgets_iface import RichTextEditorRenderer, WidgetScriptEnqueuer

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderConfig:
    # Logging/debug
    debug: bool = False

    # Text inputs whose name matches this pattern get a color picker unless
    # `nocolorpicker` is set on the call.
    colorpicker_pattern: str = r"_color\]?$"

    # Editor defaults, used when a textarea is rendered with `editor` set
    editor_rows: int = 20
    editor_media_buttons: bool = True
    # Inclusive bounds for the random editor id suffix
    editor_id_suffix_range: Tuple[int, int] = (100, 999)

    default_wrap_tag: str = "div"

    # Collaborators
    editor: RichTextEditorRenderer = field(default_factory=PlainTextEditor)
    script_enqueuer: WidgetScriptEnqueuer = field(
        default_factory=ColorPickerScriptEnqueuer
    )

    @property
    def colorpicker_regex(self) -> re.Pattern:
        return re.compile(self.colorpicker_pattern)

    def editor_field_id(self, name: str) -> str:
        low, high = self.editor_id_suffix_range
        base = name.replace("[", "_").replace("]", "_")
        return f"{base}{random.randint(low, high)}"

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "RenderConfig":
        """Build a config from plain values (e.g. a JSON config file)."""
        known = {f.name for f in fields(cls)} - {"editor", "script_enqueuer"}
        kwargs = {}
        for key, value in (data or {}).items():
            if key not in known:
                LOGGER.debug("formkit.config.unknown_key %s", key)
                continue
            if key == "editor_id_suffix_range":
                value = tuple(value)
            kwargs[key] = value
        return cls(**kwargs)
