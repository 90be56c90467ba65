"""Immutable value types flowing through the rendering pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Tuple


@dataclass(frozen=True)
class ControlDescriptor:
    """Structured input for a single control render."""

    kind: str
    name: str = ""
    attributes: Mapping[str, Any] = field(default_factory=dict)
    options: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class SelectOption:
    value: str
    label: str


@dataclass(frozen=True)
class SideEffect:
    """Extra output a control requests beside its markup (e.g. a widget script)."""

    kind: str
    target: str
    html: str = ""


@dataclass(frozen=True)
class Fragment:
    markup: str
    side_effects: Tuple[SideEffect, ...] = ()

    @property
    def html(self) -> str:
        return self.markup + "".join(se.html for se in self.side_effects)

    def with_side_effects(self, *effects: SideEffect) -> "Fragment":
        return Fragment(self.markup, self.side_effects + tuple(effects))

    def __str__(self) -> str:
        return self.html
