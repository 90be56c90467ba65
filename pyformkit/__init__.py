"""Declarative HTML form control rendering."""

from .api import (
    default_renderer,
    fieldset,
    get_var,
    input,
    select,
    set_default_renderer,
    textarea,
    wrap,
)
from .exceptions import (
    FormDocumentError,
    FormKitException,
    InvalidControlInvocation,
    UnknownControlKind,
)
from .renderer import FormRenderer
from .rendering.fragment import ControlDescriptor, Fragment, SelectOption, SideEffect
from .rendering.options import RenderConfig
from .rendering.registry import DEFAULT_REGISTRY, ControlRegistry
from .rendering.sink import BufferSink, StreamSink

__all__ = [
    "FormRenderer",
    "RenderConfig",
    "ControlDescriptor",
    "ControlRegistry",
    "DEFAULT_REGISTRY",
    "Fragment",
    "SelectOption",
    "SideEffect",
    "BufferSink",
    "StreamSink",
    "FormKitException",
    "UnknownControlKind",
    "InvalidControlInvocation",
    "FormDocumentError",
    "default_renderer",
    "set_default_renderer",
    "input",
    "textarea",
    "select",
    "wrap",
    "fieldset",
    "get_var",
]
