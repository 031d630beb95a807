"""Warble exception hierarchy.

Shared across validators, definitions, form state, and rendering so
every module raises and catches the same types.

Validation failures are not exceptions. A value rejected by a validator
becomes feedback on a ``ValidationResult``; only programming mistakes
(bad validator payloads, unknown field names) are raised.
"""

from typing import Any


class WarbleError(Exception):
    """Base for all warble-specific errors."""


class ConfigurationError(WarbleError):
    """Raised when a validator, field definition, or form is misconfigured.

    Raised at construction time wherever possible so a bad definition
    fails before it reaches a request cycle.
    """


class PredicateError(ConfigurationError):
    """A user-defined predicate raised instead of returning a bool.

    The original exception is chained as ``__cause__``.
    """

    def __init__(self, validator: Any, value: str) -> None:
        self.validator = validator
        self.value = value
        name = getattr(validator.predicate, "__qualname__", repr(validator.predicate))
        super().__init__(f"Predicate {name} raised while validating {value!r}")


class UnknownFieldError(WarbleError, LookupError):
    """A query or mutation named a field the form does not define."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown form field: {name!r}")
