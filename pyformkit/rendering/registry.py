"""Immutable kind -> builder table used for checked dispatch."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Iterator, Optional, Protocol

from ..exceptions import UnknownControlKind
from .controls import INPUT, SELECT, TEXTAREA, WRAP
from .fragment import ControlDescriptor, Fragment
from .options import RenderConfig


class ControlBuilder(Protocol):
    def render(
        self, descriptor: ControlDescriptor, config: RenderConfig
    ) -> Fragment: ...


class ControlRegistry(Mapping):
    """Read-only mapping from control kind to builder."""

    def __init__(self, builders: Mapping) -> None:
        self._builders = MappingProxyType(dict(builders))

    def __getitem__(self, kind: str) -> ControlBuilder:
        return self._builders[kind]

    def __iter__(self) -> Iterator[str]:
        return iter(self._builders)

    def __len__(self) -> int:
        return len(self._builders)

    def resolve(self, kind: str, position: Optional[int] = None) -> ControlBuilder:
        try:
            return self._builders[kind]
        except (KeyError, TypeError):
            raise UnknownControlKind(kind, position) from None

    def extended(self, **builders: ControlBuilder) -> "ControlRegistry":
        """Return a new registry with extra or replaced builders."""
        return ControlRegistry({**self._builders, **builders})


DEFAULT_REGISTRY = ControlRegistry(
    {
        "input": INPUT,
        "textarea": TEXTAREA,
        "select": SELECT,
        "wrap": WRAP,
    }
)
