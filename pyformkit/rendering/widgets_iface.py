"""
Collaborator seams used by the control builders.

The builders never know how a rich-text editor or a client-side widget is
implemented; they only call these interfaces:
  - RichTextEditorRenderer: replaces a raw <textarea> when `editor` is set
  - WidgetScriptEnqueuer: returns a script binding a widget to a field name
  - OutputSink: destination for fragments that are emitted instead of returned
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol


@dataclass(frozen=True)
class EditorOptions:
    textarea_name: str
    height: Optional[int] = None
    media_buttons: bool = True
    teeny: Optional[bool] = None
    rows: int = 20


class RichTextEditorRenderer(Protocol):
    def render(self, value: str, field_id: str, options: EditorOptions) -> str: ...


class WidgetScriptEnqueuer(Protocol):
    def enqueue(self, field_name: str) -> str: ...


class OutputSink(Protocol):
    def write(self, fragment: str) -> None: ...
