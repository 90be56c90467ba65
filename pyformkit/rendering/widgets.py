"""
Default collaborator implementations.

Applications embedding the renderer in a CMS usually provide their own editor
and script enqueuer through RenderConfig; these defaults keep the library
usable on its own. Field id uniqueness within a page is the caller's concern.
"""

from __future__ import annotations

import json

from tinyhtml import h, raw

from .widgets_iface import EditorOptions


class PlainTextEditor:
    """Renders the editor as a labelled plain textarea."""

    def render(self, value: str, field_id: str, options: EditorOptions) -> str:
        attrs = {
            "id": field_id,
            "name": options.textarea_name,
            "rows": str(options.rows),
            "class": "formkit-editor teeny" if options.teeny else "formkit-editor",
        }
        if options.height:
            attrs["style"] = f"height:{int(options.height)}px"
        return h("textarea", **attrs)(value).render()


class ColorPickerScriptEnqueuer:
    """Binds a jQuery color picker to the element named `field_name`."""

    def __init__(self, plugin: str = "wpColorPicker") -> None:
        self.plugin = plugin

    def enqueue(self, field_name: str) -> str:
        selector = json.dumps(f'[name="{field_name}"]')
        script = (
            "jQuery(document).ready(function($){"
            f"$({selector}).{self.plugin}();"
            "});"
        )
        return h("script")(raw(script)).render()
