"""
Form renderer facade.

FormRenderer wires the control builders, the registry and an OutputSink
together. Every entry point ends with the same decision: when the `return`
option is truthy the Fragment is returned, otherwise its HTML is written to
the sink and None is returned.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Iterable, Optional

from .rendering.attributes import coerce_option_set
from .rendering.composite import render_fieldset
from .rendering.fragment import ControlDescriptor, Fragment
from .rendering.options import RenderConfig
from .rendering.registry import DEFAULT_REGISTRY, ControlRegistry
from .rendering.sink import StreamSink
from .rendering.widgets_iface import OutputSink

LOGGER = logging.getLogger(__name__)

AttributeMap = Optional[Mapping[str, Any]]
OptionSet = Optional[Mapping[str, Any]]


class FormRenderer:
    """Class-based interface for control rendering."""

    def __init__(
        self,
        config: Optional[RenderConfig] = None,
        sink: Optional[OutputSink] = None,
        registry: Optional[ControlRegistry] = None,
    ):
        self.config = config or RenderConfig()
        self.sink = sink if sink is not None else StreamSink()
        self.registry = registry if registry is not None else DEFAULT_REGISTRY

    def render(self, descriptor: ControlDescriptor) -> Optional[Fragment]:
        """Render any registered control kind from a descriptor."""
        builder = self.registry.resolve(descriptor.kind)
        fragment = builder.render(descriptor, self.config)
        LOGGER.debug(
            "formkit.control.render kind=%s name=%s", descriptor.kind, descriptor.name
        )
        return self._finish(fragment, descriptor.options)

    def input(
        self, name: str, attributes: AttributeMap = None, options: OptionSet = None
    ) -> Optional[Fragment]:
        return self.render(
            ControlDescriptor("input", name, *self._sets(attributes, options))
        )

    def textarea(
        self, name: str, attributes: AttributeMap = None, options: OptionSet = None
    ) -> Optional[Fragment]:
        return self.render(
            ControlDescriptor("textarea", name, *self._sets(attributes, options))
        )

    def select(
        self, name: str, attributes: AttributeMap = None, options: OptionSet = None
    ) -> Optional[Fragment]:
        return self.render(
            ControlDescriptor("select", name, *self._sets(attributes, options))
        )

    def wrap(
        self,
        content: str = "",
        attributes: AttributeMap = None,
        options: OptionSet = None,
    ) -> Optional[Fragment]:
        return self.render(
            ControlDescriptor("wrap", content, *self._sets(attributes, options))
        )

    def fieldset(
        self,
        legend: Optional[str],
        controls: Iterable[Any] = (),
        attributes: AttributeMap = None,
        options: OptionSet = None,
    ) -> Optional[Fragment]:
        fragment = render_fieldset(
            legend, controls, attributes, self.registry, self.config
        )
        return self._finish(fragment, coerce_option_set(options, "options"))

    @staticmethod
    def _sets(attributes: Any, options: Any):
        return (
            coerce_option_set(attributes, "attributes"),
            coerce_option_set(options, "options"),
        )

    def _finish(self, fragment: Fragment, options: Any) -> Optional[Fragment]:
        if self.config.debug:
            LOGGER.debug("formkit.fragment html=%s", fragment.html)
        if isinstance(options, Mapping) and options.get("return"):
            return fragment
        self.sink.write(fragment.html)
        return None
