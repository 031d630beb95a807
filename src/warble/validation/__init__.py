"""Field validation — a closed set of validator kinds, clean results.

Usage::

    from warble.validation import email, min_length, check

    rules = [min_length(6, "Too short"), email()]
    failing = [rule.feedback for rule in rules if not check(rule, value)]

Forms run validator chains for you; see ``warble.forms.FormState``.
"""

from warble.validation.result import FieldResult, ValidationResult
from warble.validation.rules import (
    EMAIL_RE,
    MaxStrLength,
    MinStrLength,
    RegexMatch,
    UserDefinedPredicate,
    Validator,
    WellFormedEmail,
    check,
    email,
    matches,
    max_length,
    min_length,
    predicate,
)

__all__ = [
    "EMAIL_RE",
    "FieldResult",
    "MaxStrLength",
    "MinStrLength",
    "RegexMatch",
    "UserDefinedPredicate",
    "ValidationResult",
    "Validator",
    "WellFormedEmail",
    "check",
    "email",
    "matches",
    "max_length",
    "min_length",
    "predicate",
]
