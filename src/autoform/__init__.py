from __future__ import annotations

from .adapter import adapt_schema
from .descriptors import FieldConstraints, FieldDescriptor, FieldOption, FieldUI
from .enums import FieldType
from .errors import AutoformException, ShapeViolationError
from .inference import infer
from .introspection import introspect
from .labels import humanize
from .nodes import SchemaNode, unwrap
from .overrides import FieldConfig, apply_overrides

__all__ = [
    "AutoformException",
    "FieldConfig",
    "FieldConstraints",
    "FieldDescriptor",
    "FieldOption",
    "FieldType",
    "FieldUI",
    "SchemaNode",
    "ShapeViolationError",
    "adapt_schema",
    "apply_overrides",
    "humanize",
    "infer",
    "introspect",
    "unwrap",
]
