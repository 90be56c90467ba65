"""
Control builders: one small class per control kind.

Every builder follows the same pipeline:
  1. coerce the descriptor's attributes/options into dicts
  2. fill gaps from the builtin per-kind defaults
  3. force the `name` attribute to the descriptor's name
  4. assemble the raw element and apply the optional `format` template
  5. attach side effects (widget scripts) requested by the control

Builders are pure: they return a Fragment and never write anywhere. The
return-or-emit decision belongs to FormRenderer.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any, Iterator, Set, Tuple

from .attributes import coerce_option_set, is_empty_value, open_tag
from .defaults import (
    INPUT_ATTRIBUTE_DEFAULTS,
    SELECT_ATTRIBUTE_DEFAULTS,
    SELECT_OPTION_DEFAULTS,
    TEXTAREA_ATTRIBUTE_DEFAULTS,
    WRAP_OPTION_DEFAULTS,
    merge_defaults,
)
from .fragment import ControlDescriptor, Fragment, SelectOption, SideEffect
from .options import RenderConfig
from .template import format_template
from .widgets_iface import EditorOptions

LOGGER = logging.getLogger(__name__)


def _prepare(descriptor: ControlDescriptor) -> Tuple[dict, dict]:
    attributes = coerce_option_set(descriptor.attributes, "attributes")
    options = coerce_option_set(descriptor.options, "options")
    return attributes, options


class _Control:
    kind = ""

    def render(
        self, descriptor: ControlDescriptor, config: RenderConfig
    ) -> Fragment:  # pragma: no cover - interface
        raise NotImplementedError


class InputControl(_Control):
    kind = "input"

    def render(self, descriptor: ControlDescriptor, config: RenderConfig) -> Fragment:
        name = descriptor.name
        attributes, options = _prepare(descriptor)
        attributes = merge_defaults(INPUT_ATTRIBUTE_DEFAULTS, attributes)
        attributes["name"] = name

        element = open_tag("input", attributes)
        markup = format_template(
            options.get("format"),
            {
                "input": element,
                "name": name,
                "id": attributes["id"],
                "value": attributes["value"],
            },
            element,
        )
        fragment = Fragment(markup)
        if self._wants_colorpicker(name, attributes, options, config):
            LOGGER.debug("formkit.input.colorpicker name=%s", name)
            fragment = fragment.with_side_effects(
                SideEffect("colorpicker", name, config.script_enqueuer.enqueue(name))
            )
        return fragment

    @staticmethod
    def _wants_colorpicker(
        name: str, attributes: dict, options: dict, config: RenderConfig
    ) -> bool:
        if options.get("colorpicker"):
            return True
        return (
            attributes.get("type") == "text"
            and config.colorpicker_regex.search(name) is not None
            and not options.get("nocolorpicker")
        )


class TextareaControl(_Control):
    kind = "textarea"

    def render(self, descriptor: ControlDescriptor, config: RenderConfig) -> Fragment:
        name = descriptor.name
        attributes, options = _prepare(descriptor)
        attributes = merge_defaults(TEXTAREA_ATTRIBUTE_DEFAULTS, attributes)
        attributes["name"] = name
        value = options.get("value", "")
        if value is None:
            value = ""

        if options.get("editor"):
            element = self._render_editor(name, value, attributes, options, config)
        else:
            element = f"{open_tag('textarea', attributes)}{value}</textarea>"

        markup = format_template(
            options.get("format"),
            {"textarea": element, "value": value, "name": name, "id": attributes["id"]},
            element,
        )
        return Fragment(markup)

    @staticmethod
    def _render_editor(
        name: str, value: Any, attributes: dict, options: dict, config: RenderConfig
    ) -> str:
        editor_options = EditorOptions(
            textarea_name=name,
            height=options.get("editor_height"),
            media_buttons=options.get("media_buttons", config.editor_media_buttons),
            teeny=options.get("teeny"),
            rows=options.get("textarea_rows", config.editor_rows),
        )
        field_id = config.editor_field_id(name)
        LOGGER.debug("formkit.textarea.editor name=%s field_id=%s", name, field_id)
        editor_html = config.editor.render(str(value), field_id, editor_options)
        # The editor binds the name itself.
        div_attributes = {k: v for k, v in attributes.items() if k != "name"}
        return f"{open_tag('div', div_attributes)}{editor_html}</div>"


def _iter_select_options(choices: Any) -> Iterator[Tuple[Any, Any]]:
    if not choices:
        return
    if isinstance(choices, Mapping):
        yield from choices.items()
        return
    if isinstance(choices, (str, bytes)) or not isinstance(choices, Iterable):
        LOGGER.warning(
            "formkit.select.options_malformed type=%s", type(choices).__name__
        )
        return
    # Bare entries are positional: the index is the value, the entry the label.
    for index, choice in enumerate(choices):
        if isinstance(choice, SelectOption):
            yield choice.value, choice.label
        elif isinstance(choice, (str, bytes, int, float)):
            yield index, choice
        elif isinstance(choice, (tuple, list)) and len(choice) == 2:
            yield choice[0], choice[1]
        else:
            LOGGER.warning(
                "formkit.select.option_skipped index=%d type=%s",
                index,
                type(choice).__name__,
            )


def _selected_values(options: dict) -> Set[str]:
    selected = options.get("selected")
    if is_empty_value(selected) or (
        isinstance(selected, (list, tuple, set, frozenset)) and not selected
    ):
        values: Iterable[Any] = [options.get("default")]
    elif isinstance(selected, (str, bytes)) or not isinstance(selected, Iterable):
        values = [selected]
    else:
        values = selected
    return {"" if v is None else str(v) for v in values}


class SelectControl(_Control):
    kind = "select"

    def render(self, descriptor: ControlDescriptor, config: RenderConfig) -> Fragment:
        name = descriptor.name
        attributes, options = _prepare(descriptor)
        attributes = merge_defaults(SELECT_ATTRIBUTE_DEFAULTS, attributes)
        options = merge_defaults(SELECT_OPTION_DEFAULTS, options)

        if attributes.get("multiple") or options.get("multiple"):
            attributes["multiple"] = "multiple"
            name += "[]"
        attributes["name"] = name

        selected = _selected_values(options)
        option_html = "".join(
            WRAP.render(
                ControlDescriptor(
                    "wrap",
                    str(label),
                    {
                        "value": value,
                        "selected": "selected" if str(value) in selected else None,
                    },
                    {"in": "option", "return": True},
                ),
                config,
            ).markup
            for value, label in _iter_select_options(options["options"])
        )

        element = (
            f"{options['html_before']}{open_tag('select', attributes)}"
            f"{option_html}</select>{options['html_after']}"
        )
        markup = format_template(
            options.get("format"),
            {"select": element, "name": name, "id": attributes["id"]},
            element,
        )
        return Fragment(markup)


class WrapControl(_Control):
    """Wraps content in a tag; the descriptor's name carries the content."""

    kind = "wrap"

    def render(self, descriptor: ControlDescriptor, config: RenderConfig) -> Fragment:
        attributes, options = _prepare(descriptor)
        options = merge_defaults(
            {**WRAP_OPTION_DEFAULTS, "in": config.default_wrap_tag}, options
        )
        tag = options["in"]
        return Fragment(
            f"{options['html_before']}{open_tag(tag, attributes)}"
            f"{descriptor.name}</{tag}>{options['html_after']}"
        )


INPUT = InputControl()
TEXTAREA = TextareaControl()
SELECT = SelectControl()
WRAP = WrapControl()
