"""
Pydantic models for JSON form documents.

A document describes one or more fieldsets, each holding an ordered list of
controls. Controls may be written as objects or in the compact list form:

    {
      "title": "Settings",
      "fieldsets": [
        {
          "legend": "Info",
          "controls": [
            ["input", "site_name", {"id": "site-name"}],
            {"kind": "select", "name": "theme", "options": {"options": {"l": "Light"}}}
          ]
        }
      ]
    }
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from ..exceptions import FormDocumentError
from ..rendering.attributes import coerce_option_set
from ..rendering.fragment import ControlDescriptor

LOGGER = logging.getLogger(__name__)


# ─── Base and Shared Config ──────────────────────────────────────────────────
class ConfigModel(BaseModel):
    """Base class allowing population by name and ignoring unknown fields."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class ControlSpec(ConfigModel):
    """One control invocation inside a fieldset."""

    kind: str
    """Registered control kind, e.g. "input" or "select"."""

    name: str = ""
    """Control name (for "wrap", the wrapped content)."""

    attributes: Dict[str, Any] = Field(default_factory=dict)
    options: Dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _from_list(cls, data: Any) -> Any:
        if isinstance(data, (list, tuple)):
            if not 2 <= len(data) <= 4:
                raise ValueError(
                    f"control list must have 2 to 4 items, got {len(data)}"
                )
            kind, name, attributes, options = (list(data) + [None, None])[:4]
            return {
                "kind": kind,
                "name": name if name is not None else "",
                "attributes": attributes,
                "options": options,
            }
        return data

    @field_validator("attributes", "options", mode="before")
    @classmethod
    def _option_set(cls, value: Any, info) -> Dict[str, Any]:
        return coerce_option_set(value, info.field_name)

    def to_descriptor(self) -> ControlDescriptor:
        return ControlDescriptor(
            kind=self.kind,
            name=self.name,
            attributes=dict(self.attributes),
            options=dict(self.options),
        )


class FieldsetSpec(ConfigModel):
    legend: str = ""
    controls: List[ControlSpec] = Field(default_factory=list)
    attributes: Dict[str, Any] = Field(default_factory=dict)
    options: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("attributes", "options", mode="before")
    @classmethod
    def _option_set(cls, value: Any, info) -> Dict[str, Any]:
        return coerce_option_set(value, info.field_name)


class FormDocument(ConfigModel):
    title: str = "Form"
    action: str = ""
    method: str = "post"
    fieldsets: List[FieldsetSpec] = Field(default_factory=list)


def load_document(source: Union[str, Path, Dict[str, Any]]) -> FormDocument:
    """Load and validate a form document from a path or an already-parsed dict."""
    if isinstance(source, dict):
        data = source
    else:
        try:
            with open(source, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            raise FormDocumentError(
                f"Could not read form document {source}: {exc}"
            ) from exc
    try:
        document = FormDocument.model_validate(data)
    except ValidationError as exc:
        raise FormDocumentError(f"Invalid form document: {exc}") from exc
    LOGGER.debug("formkit.document.loaded fieldsets=%d", len(document.fieldsets))
    return document
