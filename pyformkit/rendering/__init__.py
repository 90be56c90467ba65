"""Rendering pipeline for HTML form controls, transport-agnostic.

Contains:
- attributes: attribute serialization and option-set coercion
- defaults: builtin per-kind defaults and the shallow defaults merger
- template: placeholder substitution for output templates
- fragment: immutable value types (descriptors, fragments, side effects)
- widgets_iface / widgets: collaborator seams and their default implementations
- controls / registry / composite: control builders, kind dispatch, fieldsets
- sink: output destinations for emitted fragments
- page: standalone preview page wrapper
- exporter: JSON form documents rendered through a FormRenderer
"""
