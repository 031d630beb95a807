"""Built-in validators for warble forms.

A validator is one of five frozen dataclasses. Each carries the message
shown when it rejects a value and an ``optional`` flag; an optional
validator accepts an empty value without evaluating its rule::

    MinStrLength(feedback="Too short", length=6)
    RegexMatch(feedback="Numbers only", pattern=r"^\\d+$", optional=True)

The set of kinds is closed. ``check()`` dispatches over it with an
exhaustive ``match``, and each dataclass verifies its own payload at
construction so a validator that exists is always usable.

Factory functions mirror the dataclasses with default messages::

    email()
    min_length(8, "Passwords need at least 8 characters")
    predicate(is_unique, "That name is taken", optional=True)
"""

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import assert_never

from warble.errors import ConfigurationError, PredicateError

# Legacy address grammar. Accepts some invalid addresses and rejects some
# valid ones (single-label domains); kept as is for compatibility.
EMAIL_RE = re.compile(r"^[\w\-.+]+@\w+(\.[\w\-]+)+$")


def _check_feedback(feedback: object) -> None:
    if not isinstance(feedback, str):
        msg = f"Validator feedback must be a string, got {type(feedback).__name__}"
        raise ConfigurationError(msg)


def _check_length(kind: str, length: object) -> None:
    # bool is an int subclass; True is not a length.
    if isinstance(length, bool) or not isinstance(length, int):
        msg = f"{kind} needs an integer length, got {length!r}"
        raise ConfigurationError(msg)
    if length < 0:
        msg = f"{kind} length must not be negative, got {length}"
        raise ConfigurationError(msg)


# ---------------------------------------------------------------------------
# Validator kinds
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class WellFormedEmail:
    """Value must look like ``local@domain.tld``."""

    feedback: str = "Must be a well formed email address"
    optional: bool = False

    def __post_init__(self) -> None:
        _check_feedback(self.feedback)

    def validate(self, value: str | None) -> bool:
        return check(self, value)


@dataclass(frozen=True, slots=True)
class MinStrLength:
    """Value must be at least ``length`` characters."""

    feedback: str = "Must be at least 1 character"
    length: int = 1
    optional: bool = False

    def __post_init__(self) -> None:
        _check_feedback(self.feedback)
        _check_length("MinStrLength", self.length)

    def validate(self, value: str | None) -> bool:
        return check(self, value)


@dataclass(frozen=True, slots=True)
class MaxStrLength:
    """Value must be at most ``length`` characters."""

    feedback: str = "Must be at most 30 characters"
    length: int = 30
    optional: bool = False

    def __post_init__(self) -> None:
        _check_feedback(self.feedback)
        _check_length("MaxStrLength", self.length)

    def validate(self, value: str | None) -> bool:
        return check(self, value)


@dataclass(frozen=True, slots=True)
class RegexMatch:
    """Value must contain a match for ``pattern``.

    Matching is an unanchored search; anchor the pattern with ``^``/``$``
    to match the whole value. String patterns are compiled once, here,
    so a malformed pattern fails when the validator is built.
    """

    feedback: str
    pattern: re.Pattern[str]
    optional: bool = False

    def __init__(
        self,
        feedback: str = "Must match the expected format",
        pattern: str | re.Pattern[str] | None = None,
        optional: bool = False,
    ) -> None:
        _check_feedback(feedback)
        if pattern is None or pattern == "":
            msg = "RegexMatch needs a pattern"
            raise ConfigurationError(msg)
        if isinstance(pattern, str):
            try:
                pattern = re.compile(pattern)
            except re.error as exc:
                msg = f"RegexMatch pattern {pattern!r} does not compile: {exc}"
                raise ConfigurationError(msg) from exc
        elif not isinstance(pattern, re.Pattern):
            msg = f"RegexMatch pattern must be a string or compiled pattern, got {pattern!r}"
            raise ConfigurationError(msg)
        if not isinstance(pattern.pattern, str):
            msg = f"RegexMatch pattern must be a text pattern, got bytes pattern {pattern.pattern!r}"
            raise ConfigurationError(msg)
        object.__setattr__(self, "feedback", feedback)
        object.__setattr__(self, "pattern", pattern)
        object.__setattr__(self, "optional", optional)

    def validate(self, value: str | None) -> bool:
        return check(self, value)


@dataclass(frozen=True, slots=True)
class UserDefinedPredicate:
    """Value must satisfy an arbitrary caller-supplied function.

    The predicate receives the field value and returns a truthy result
    to accept it. Use a closure to reach other state (a uniqueness
    lookup, another field's value). Any I/O it does is synchronous.
    """

    feedback: str
    predicate: Callable[[str], bool]
    optional: bool = False

    def __init__(
        self,
        feedback: str = "Is not acceptable",
        predicate: Callable[[str], bool] | None = None,
        optional: bool = False,
    ) -> None:
        _check_feedback(feedback)
        if predicate is None or not callable(predicate):
            msg = f"UserDefinedPredicate needs a callable predicate, got {predicate!r}"
            raise ConfigurationError(msg)
        object.__setattr__(self, "feedback", feedback)
        object.__setattr__(self, "predicate", predicate)
        object.__setattr__(self, "optional", optional)

    def validate(self, value: str | None) -> bool:
        return check(self, value)


type Validator = WellFormedEmail | MinStrLength | MaxStrLength | RegexMatch | UserDefinedPredicate

VALIDATOR_TYPES: tuple[type, ...] = (
    WellFormedEmail,
    MinStrLength,
    MaxStrLength,
    RegexMatch,
    UserDefinedPredicate,
)


def check(validator: Validator, value: str | None) -> bool:
    """Return True if *value* passes *validator*.

    ``None`` is treated as the empty string. Optional validators accept
    an empty value before their rule runs.

    Raises:
        PredicateError: If a ``UserDefinedPredicate`` raises.
    """
    value = value or ""
    if validator.optional and not value:
        return True

    match validator:
        case WellFormedEmail():
            return EMAIL_RE.match(value) is not None
        case MinStrLength(length=n):
            return len(value) >= n
        case MaxStrLength(length=n):
            return len(value) <= n
        case RegexMatch(pattern=pattern):
            return pattern.search(value) is not None
        case UserDefinedPredicate(predicate=fn):
            try:
                return bool(fn(value))
            except Exception as exc:
                raise PredicateError(validator, value) from exc
        case _:
            assert_never(validator)


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------


def email(
    feedback: str = "Must be a well formed email address",
    *,
    optional: bool = False,
) -> WellFormedEmail:
    """Value must be a well formed email address."""
    return WellFormedEmail(feedback=feedback, optional=optional)


def min_length(n: int = 1, feedback: str | None = None, *, optional: bool = False) -> MinStrLength:
    """String must be at least *n* characters."""
    if feedback is None:
        feedback = f"Must be at least {n} characters"
    return MinStrLength(feedback=feedback, length=n, optional=optional)


def max_length(n: int = 30, feedback: str | None = None, *, optional: bool = False) -> MaxStrLength:
    """String must be at most *n* characters."""
    if feedback is None:
        feedback = f"Must be at most {n} characters"
    return MaxStrLength(feedback=feedback, length=n, optional=optional)


def matches(
    pattern: str | re.Pattern[str],
    feedback: str | None = None,
    *,
    optional: bool = False,
) -> RegexMatch:
    """Value must contain a match for the given regex pattern."""
    if feedback is None:
        source = pattern.pattern if isinstance(pattern, re.Pattern) else pattern
        feedback = f"Must match pattern: {source}"
    return RegexMatch(feedback=feedback, pattern=pattern, optional=optional)


def predicate(
    fn: Callable[[str], bool],
    feedback: str = "Is not acceptable",
    *,
    optional: bool = False,
) -> UserDefinedPredicate:
    """Value must satisfy *fn*."""
    return UserDefinedPredicate(feedback=feedback, predicate=fn, optional=optional)
