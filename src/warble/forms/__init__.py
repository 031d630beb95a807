"""Declarative forms — field definitions, runtime fields, form state."""

from warble.forms.definitions import FieldDefinition, FieldType, Option
from warble.forms.field import Field, validate_field
from warble.forms.state import FieldSnapshot, FormSnapshot, FormState

__all__ = [
    "Field",
    "FieldDefinition",
    "FieldSnapshot",
    "FieldType",
    "FormSnapshot",
    "FormState",
    "Option",
    "validate_field",
]
