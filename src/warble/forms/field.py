"""Runtime field state and the per-field validation pass."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from warble.forms.definitions import FieldDefinition, FieldType, Option
from warble.validation.result import FieldResult
from warble.validation.rules import Validator, check


@dataclass(slots=True)
class Field:
    """One form input: its definition plus the value it currently holds.

    Owned by a single ``FormState``. The value is fixed when the form is
    built and changes only through ``FormState.set_field_value()``;
    validation reads it but never writes to the field.
    """

    name: str
    definition: FieldDefinition
    value: str = ""

    @classmethod
    def populate(
        cls,
        name: str,
        definition: FieldDefinition,
        submitted: Mapping[str, str | None],
    ) -> Field:
        """Build a field from its definition and the submitted values.

        Checkboxes take their ``default_value`` when the submission holds a
        non-empty entry for them and ``""`` otherwise. Every other type
        takes the submitted value, falling back to ``default_value`` when
        the entry is missing or empty. An empty submission and no
        submission are the same thing.
        """
        raw = submitted.get(name)
        if definition.type is FieldType.CHECKBOX:
            value = definition.default_value if raw else ""
        else:
            value = raw if raw else definition.default_value
        return cls(name=name, definition=definition, value=value)

    @property
    def label(self) -> str:
        return self.definition.label

    @property
    def type(self) -> FieldType:
        return self.definition.type

    @property
    def default_value(self) -> str:
        return self.definition.default_value

    @property
    def default_checked(self) -> bool:
        return self.definition.default_checked

    @property
    def options(self) -> tuple[Option, ...]:
        return self.definition.options

    @property
    def validators(self) -> tuple[Validator, ...]:
        return self.definition.validators

    @property
    def display_value(self) -> str:
        """The value to show in markup: current value, else the default."""
        return self.value or self.default_value

    @property
    def is_checked(self) -> bool:
        """Whether a checkbox renders checked (value set or checked by default)."""
        return bool(self.value) or self.default_checked


def validate_field(field: Field) -> FieldResult:
    """Run *field*'s validators, in declared order, against its value.

    Every validator runs; the feedback of each one that rejects the
    value is collected. The field is valid only if all of them pass.
    """
    if not field.validators:
        return FieldResult(is_valid=True)

    feedback: list[str] = []
    passed = 0
    for rule in field.validators:
        if check(rule, field.value):
            passed += 1
        else:
            feedback.append(rule.feedback)

    return FieldResult(is_valid=passed == len(field.validators), feedback=tuple(feedback))
