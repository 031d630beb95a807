"""Warble — declarative HTML forms: define, populate, validate, render.

Describe a form's fields once, build a ``FormState`` from what the
client submitted, validate it, and render it with per-field feedback.

Basic usage::

    from warble import FieldDefinition, FormState
    from warble.validation import email, min_length
    from warble.rendering import form_html

    FIELDS = {
        "name": FieldDefinition("Name", "text", validators=[min_length(2, "Too short")]),
        "email": FieldDefinition("Email", "text", validators=[email()]),
    }

    form = FormState(FIELDS, submitted=data, order=("name", "email"))
    result = form.validate()
    if not result:
        return form_html(form, "/signup")
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "FieldDefinition",
    "FieldType",
    "FormConfig",
    "FormState",
    "Option",
    "PredicateError",
    "UnknownFieldError",
    "ValidationResult",
    "WarbleError",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import warble`` fast while providing a clean top-level API.
    """
    if name == "FormState":
        from warble.forms.state import FormState

        return FormState

    if name in ("FieldDefinition", "FieldType", "Option"):
        from warble.forms import definitions as _definitions

        return getattr(_definitions, name)

    if name == "FormConfig":
        from warble.config import FormConfig

        return FormConfig

    if name == "ValidationResult":
        from warble.validation.result import ValidationResult

        return ValidationResult

    if name in ("ConfigurationError", "PredicateError", "UnknownFieldError", "WarbleError"):
        from warble import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
