"""FormState — the fields of one form, their values, and their validity.

A FormState is request-scoped: build one per submission or render
cycle, validate it, query it, render it, and drop it.

Usage::

    from warble import FormState, FieldDefinition
    from warble.validation import email, min_length

    FIELDS = {
        "name": FieldDefinition("Name", "text", validators=[min_length(2, "Too short")]),
        "email": FieldDefinition("Email", "text", validators=[email()]),
        "news": FieldDefinition("Newsletter", "checkbox", default_value="Y"),
    }

    form = FormState(FIELDS, submitted=request_data, order=("name", "email", "news"))
    if form.is_submitted(request.method):
        result = form.validate()
        if result:
            save(result.data)
"""

from __future__ import annotations

import html
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from kida.template import Markup

from warble.config import FormConfig
from warble.errors import ConfigurationError, UnknownFieldError
from warble.forms.definitions import FieldDefinition, FieldType, Option, coerce_definitions
from warble.forms.field import Field, validate_field
from warble.submission import Submitted, submitted_values
from warble.validation.result import FieldResult, ValidationResult

logger = logging.getLogger("warble.forms")


@dataclass(frozen=True, slots=True)
class FieldSnapshot:
    """Everything a renderer needs to know about one field.

    ``is_valid`` is ``None`` until the form has been validated.
    """

    name: str
    label: str
    type: FieldType
    value: str
    default_value: str
    default_checked: bool
    options: tuple[Option, ...]
    feedback: tuple[str, ...]
    is_valid: bool | None


@dataclass(frozen=True, slots=True)
class FormSnapshot:
    """Form-level state: validity and the display order of fields."""

    is_valid: bool
    order: tuple[str, ...]


class FormState:
    """The runtime state of one form.

    Built from a table of field definitions and the values a client
    submitted. Each field's value is populated at construction (see
    ``Field.populate``); validity is unknown until ``validate()`` runs.

    ``order`` lists field names in display order. It is stored as given
    and used only for rendering; no order is derived from the
    definitions table.
    """

    __slots__ = ("_config", "_fields", "_order", "_result")

    def __init__(
        self,
        definitions: Mapping[str, FieldDefinition | Mapping[str, Any]],
        submitted: Submitted | None = None,
        order: Iterable[str] = (),
        *,
        config: FormConfig | None = None,
    ) -> None:
        self._config = config or FormConfig()
        table = coerce_definitions(definitions)
        values = submitted_values(submitted)

        self._fields: dict[str, Field] = {
            name: Field.populate(name, definition, values) for name, definition in table.items()
        }
        self._order: tuple[str, ...] = tuple(order)
        self._result: ValidationResult | None = None
        self._check()

    @classmethod
    def create(
        cls,
        definitions: Mapping[str, FieldDefinition | Mapping[str, Any]],
        submitted: Submitted | None = None,
        order: Iterable[str] = (),
        *,
        config: FormConfig | None = None,
    ) -> FormState:
        """Alternate constructor, identical to ``FormState(...)``."""
        return cls(definitions, submitted, order, config=config)

    def _check(self) -> None:
        unknown = [name for name in self._order if name not in self._fields]
        if unknown:
            msg = f"Field order names undefined fields: {', '.join(unknown)}"
            raise ConfigurationError(msg)

        if self._config.strict_options:
            for field in self._fields.values():
                if field.definition.needs_options and not field.options:
                    msg = f"{field.type.value.capitalize()} field {field.name!r} has no options"
                    raise ConfigurationError(msg)

    def __repr__(self) -> str:
        state = "unvalidated" if self._result is None else ("valid" if self.is_valid else "invalid")
        return f"<FormState fields={list(self._fields)} {state}>"

    # -- Validation --

    def validate(self) -> ValidationResult:
        """Run every field's validator chain and record the outcome.

        Each call starts over: the form is valid until a field fails,
        and feedback from earlier calls is discarded, so calling twice
        without changing a value gives the same result.

        Returns:
            A ``ValidationResult``; its ``data`` maps each fully valid
            field to its value.

        Raises:
            PredicateError: If a user-defined predicate raises.
        """
        results: dict[str, FieldResult] = {}
        data: dict[str, str] = {}
        for name, field in self._fields.items():
            outcome = validate_field(field)
            results[name] = outcome
            if outcome.is_valid:
                data[name] = field.value

        self._result = ValidationResult(data=data, fields=results)
        if self._result.is_valid:
            logger.debug("Form valid (%d fields)", len(results))
        else:
            logger.debug("Form invalid: %s", ", ".join(sorted(self._result.errors)))
        return self._result

    @property
    def result(self) -> ValidationResult | None:
        """The most recent ``ValidationResult``, or None before ``validate()``."""
        return self._result

    @property
    def validated(self) -> bool:
        """True once ``validate()`` has run."""
        return self._result is not None

    @property
    def is_valid(self) -> bool:
        """Form-level validity from the latest ``validate()`` call.

        True before the form has been validated; call ``validate()``
        first for a meaningful answer.
        """
        if self._result is None:
            return True
        return self._result.is_valid

    # -- Queries --

    @property
    def config(self) -> FormConfig:
        return self._config

    @property
    def fields(self) -> Mapping[str, Field]:
        """Read-only view of ``name -> Field``."""
        return MappingProxyType(self._fields)

    @property
    def fields_order(self) -> tuple[str, ...]:
        """Field names in display order, as given at construction."""
        return self._order

    def get_field(self, name: str) -> Field:
        """Return the named field.

        Raises:
            UnknownFieldError: If the form has no such field.
        """
        try:
            return self._fields[name]
        except KeyError:
            raise UnknownFieldError(name) from None

    def get_field_value(self, name: str) -> str:
        return self.get_field(name).value

    def get_field_type(self, name: str) -> FieldType:
        return self.get_field(name).type

    def get_field_label(self, name: str) -> str:
        """Return the field's label.

        Checkbox labels come wrapped in a ``<label for=...>`` element so
        clicking the text toggles the box.
        """
        field = self.get_field(name)
        if field.type is not FieldType.CHECKBOX:
            return field.label
        label = html.escape(field.label) if self._config.autoescape else field.label
        for_name = html.escape(name) if self._config.autoescape else name
        return Markup(f"<label for='{for_name}'>{label}</label>")

    def get_field_error_feedback(self, name: str) -> list[str]:
        """Return the feedback from the latest validation, in validator order.

        Empty if the field passed or the form has not been validated.
        """
        field = self.get_field(name)
        if self._result is None:
            return []
        return list(self._result.fields[field.name].feedback)

    def get_field_validity(self, name: str) -> bool | None:
        """Return True/False from the latest validation, or None if unknown."""
        field = self.get_field(name)
        if self._result is None:
            return None
        return self._result.fields[field.name].is_valid

    # -- Mutation --

    def set_field_value(self, name: str, value: str) -> None:
        """Overwrite a field's value outside the submission path.

        Useful for normalising input before it is saved. The latest
        validation result is kept as is; call ``validate()`` again to
        re-check the new value.

        Raises:
            UnknownFieldError: If the form has no such field and
                ``config.strict_fields`` is set. Otherwise unknown
                names are ignored.
        """
        field = self._fields.get(name)
        if field is None:
            if self._config.strict_fields:
                raise UnknownFieldError(name)
            logger.debug("Ignoring value for unknown field %r", name)
            return
        field.value = value

    # -- Submission --

    @staticmethod
    def is_submitted(actual_method: str | None, expected_method: str = "POST") -> bool:
        """True if the request method is exactly *expected_method*.

        Plain string equality; ``"post"`` does not match ``"POST"``.
        """
        return actual_method == expected_method

    # -- Snapshots --

    def snapshot(self, name: str) -> FieldSnapshot:
        """Return an immutable view of one field for rendering."""
        field = self.get_field(name)
        return FieldSnapshot(
            name=field.name,
            label=field.label,
            type=field.type,
            value=field.value,
            default_value=field.default_value,
            default_checked=field.default_checked,
            options=field.options,
            feedback=tuple(self.get_field_error_feedback(name)),
            is_valid=self.get_field_validity(name),
        )

    def form_snapshot(self) -> FormSnapshot:
        return FormSnapshot(is_valid=self.is_valid, order=self._order)
