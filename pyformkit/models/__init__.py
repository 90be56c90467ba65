"""Data models for form documents."""

from .document import ControlSpec, FieldsetSpec, FormDocument, load_document

__all__ = ["ControlSpec", "FieldsetSpec", "FormDocument", "load_document"]
