"""
Fieldset rendering.

Each child invocation is dispatched by kind through a ControlRegistry with its
`return` option forced on, so children are always captured as values. Child
markup is concatenated in declaration order; child side effects are hoisted
onto the fieldset fragment in the same order.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Iterable, List, Mapping, Optional

from ..exceptions import InvalidControlInvocation
from .attributes import coerce_option_set, serialize_attributes
from .fragment import ControlDescriptor, Fragment, SideEffect
from .options import RenderConfig
from .registry import ControlRegistry
from .template import format_template

LOGGER = logging.getLogger(__name__)

FIELDSET_TEMPLATE = "<fieldset:parameters><legend>:legend</legend>:controls</fieldset>"


def child_descriptor(control: Any, position: int) -> ControlDescriptor:
    """Normalize a child invocation and force its `return` option."""
    if isinstance(control, ControlDescriptor):
        kind, name = control.kind, control.name
        attributes, options = control.attributes, control.options
    elif isinstance(control, Sequence) and not isinstance(control, (str, bytes)):
        if not 2 <= len(control) <= 4:
            raise InvalidControlInvocation(
                position, f"expected 2 to 4 items, got {len(control)}"
            )
        kind, name, attributes, options = (list(control) + [None, None])[:4]
    else:
        raise InvalidControlInvocation(
            position, f"unsupported type {type(control).__name__}"
        )

    options = coerce_option_set(options, "options")
    options["return"] = True
    return ControlDescriptor(
        kind=kind,
        name="" if name is None else str(name),
        attributes=coerce_option_set(attributes, "attributes"),
        options=options,
    )


def render_fieldset(
    legend: Optional[str],
    controls: Iterable[Any],
    attributes: Optional[Mapping[str, Any]],
    registry: ControlRegistry,
    config: RenderConfig,
) -> Fragment:
    """Render a fieldset around `controls`.

    Child markup stays contiguous inside the fieldset, in declaration order.
    Child side effects (widget scripts) are not interleaved with it: they
    trail the closing `</fieldset>` when the fragment is serialized.
    """
    markup: List[str] = []
    side_effects: List[SideEffect] = []
    for position, control in enumerate(controls or ()):
        descriptor = child_descriptor(control, position)
        builder = registry.resolve(descriptor.kind, position)
        child = builder.render(descriptor, config)
        markup.append(child.markup)
        side_effects.extend(child.side_effects)
    LOGGER.debug("formkit.fieldset.render children=%d", len(markup))

    parameters = serialize_attributes(coerce_option_set(attributes, "attributes"))
    shell = format_template(
        FIELDSET_TEMPLATE,
        {
            "legend": legend or "",
            "controls": "".join(markup),
            "parameters": f" {parameters}" if parameters else "",
        },
    )
    return Fragment(shell, tuple(side_effects))
