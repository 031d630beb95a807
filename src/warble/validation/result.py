"""Validation results — immutable records of one validation pass."""

from dataclasses import dataclass, field

_NO_FEEDBACK: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class FieldResult:
    """The outcome of running one field's validator chain.

    ``feedback`` holds one message per failing validator, in the order
    the validators were declared. A field with no validators is valid.
    """

    is_valid: bool
    feedback: tuple[str, ...] = _NO_FEEDBACK


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """The outcome of validating every field of a form.

    ``is_valid`` is True when no field failed.
    The result is falsy when invalid, so you can write::

        result = form.validate()
        if not result:
            return render_form_with_feedback(form)

    ``data`` maps the names of fully valid fields to their values.
    Fields with at least one failing validator are left out.

    ``fields`` maps every field name to its ``FieldResult``.
    """

    data: dict[str, str]
    fields: dict[str, FieldResult] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        """True if every field passed all of its validators."""
        return all(r.is_valid for r in self.fields.values())

    @property
    def errors(self) -> dict[str, list[str]]:
        """Failing fields mapped to their feedback messages::

            {"email": ["Must be a well formed email address"]}
        """
        return {name: list(r.feedback) for name, r in self.fields.items() if not r.is_valid}

    def __bool__(self) -> bool:
        """Falsy when invalid — enables ``if not result:`` pattern."""
        return self.is_valid
