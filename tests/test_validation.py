"""Tests for warble.validation — validator kinds, check(), and results."""

import re

import pytest

from warble.errors import ConfigurationError, PredicateError
from warble.validation import (
    FieldResult,
    MaxStrLength,
    MinStrLength,
    RegexMatch,
    UserDefinedPredicate,
    ValidationResult,
    WellFormedEmail,
    check,
    email,
    matches,
    max_length,
    min_length,
    predicate,
)

# ---------------------------------------------------------------------------
# Individual kinds
# ---------------------------------------------------------------------------


class TestWellFormedEmail:
    def test_valid(self) -> None:
        assert WellFormedEmail("bad").validate("a@b.com") is True

    def test_valid_with_dots_and_plus(self) -> None:
        assert check(email(), "first.last+tag@mail.example.org") is True

    def test_hyphen_in_later_label(self) -> None:
        assert check(email(), "joe@example.co-op.net") is True

    def test_not_an_email(self) -> None:
        assert check(email(), "not-an-email") is False

    def test_no_dot_after_domain(self) -> None:
        assert check(email(), "a@b") is False

    def test_missing_local_part(self) -> None:
        assert check(email(), "@example.com") is False

    def test_empty_not_optional(self) -> None:
        assert check(email(), "") is False

    def test_none_not_optional(self) -> None:
        assert check(email(), None) is False


class TestMinStrLength:
    def test_at_minimum(self) -> None:
        assert check(min_length(3), "abc") is True

    def test_one_below_minimum(self) -> None:
        assert check(min_length(3), "ab") is False

    def test_above_minimum(self) -> None:
        assert check(min_length(3), "abcd") is True

    def test_default_length_is_one(self) -> None:
        rule = MinStrLength("Required")
        assert rule.length == 1
        assert rule.validate("") is False
        assert rule.validate("x") is True

    def test_rejects_pattern_payload(self) -> None:
        with pytest.raises(ConfigurationError):
            MinStrLength("bad", length=r"^\d+$")  # type: ignore[arg-type]

    def test_rejects_bool_payload(self) -> None:
        with pytest.raises(ConfigurationError):
            MinStrLength("bad", length=True)

    def test_rejects_negative(self) -> None:
        with pytest.raises(ConfigurationError):
            min_length(-1)


class TestMaxStrLength:
    def test_at_limit(self) -> None:
        assert check(max_length(5), "12345") is True

    def test_one_over_limit(self) -> None:
        assert check(max_length(5), "123456") is False

    def test_default_length_is_thirty(self) -> None:
        rule = MaxStrLength("Too long")
        assert rule.length == 30
        assert rule.validate("x" * 30) is True
        assert rule.validate("x" * 31) is False

    def test_empty_passes(self) -> None:
        assert check(max_length(5), "") is True


class TestRegexMatch:
    def test_anchored_pattern(self) -> None:
        assert check(matches(r"^\d{3}$"), "123") is True
        assert check(matches(r"^\d{3}$"), "1234") is False

    def test_unanchored_search(self) -> None:
        assert check(matches(r"\d"), "abc1def") is True

    def test_compiled_pattern(self) -> None:
        rule = RegexMatch("Letters only", re.compile(r"^[a-z]+$", re.IGNORECASE))
        assert rule.validate("Hello") is True

    def test_string_pattern_compiled_at_construction(self) -> None:
        rule = matches(r"^\d+$")
        assert isinstance(rule.pattern, re.Pattern)

    def test_malformed_pattern_fails_fast(self) -> None:
        with pytest.raises(ConfigurationError, match="does not compile"):
            matches(r"([a-z")

    def test_missing_pattern(self) -> None:
        with pytest.raises(ConfigurationError, match="needs a pattern"):
            RegexMatch("Numbers only")

    def test_bytes_pattern_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="text pattern"):
            RegexMatch("Numbers only", re.compile(rb"^\d+$"))

    def test_default_feedback_names_pattern(self) -> None:
        assert matches(r"^\d+$").feedback == r"Must match pattern: ^\d+$"

    def test_custom_feedback(self) -> None:
        assert matches(r"^\d+$", "Numbers only").feedback == "Numbers only"


class TestUserDefinedPredicate:
    def test_returns_predicate_result(self) -> None:
        taken = {"homer", "marge"}
        rule = predicate(lambda v: v not in taken, "That name is taken")
        assert rule.validate("bart") is True
        assert rule.validate("homer") is False

    def test_truthy_result_coerced(self) -> None:
        rule = predicate(lambda v: v.count("a"))
        assert check(rule, "banana") is True

    def test_missing_predicate(self) -> None:
        with pytest.raises(ConfigurationError, match="callable predicate"):
            UserDefinedPredicate("No function")

    def test_non_callable_predicate(self) -> None:
        with pytest.raises(ConfigurationError):
            UserDefinedPredicate("Not callable", predicate="yes")  # type: ignore[arg-type]

    def test_raising_predicate_is_configuration_error(self) -> None:
        def broken(value: str) -> bool:
            raise RuntimeError("lookup failed")

        rule = predicate(broken, "Unavailable")
        with pytest.raises(PredicateError) as exc_info:
            rule.validate("x")
        assert isinstance(exc_info.value, ConfigurationError)
        assert isinstance(exc_info.value.__cause__, RuntimeError)
        assert exc_info.value.validator is rule


# ---------------------------------------------------------------------------
# Optional validators
# ---------------------------------------------------------------------------


class TestOptional:
    @pytest.mark.parametrize(
        "rule",
        [
            email(optional=True),
            min_length(10, optional=True),
            max_length(0, optional=True),
            matches(r"^\d+$", optional=True),
            predicate(lambda v: False, optional=True),
        ],
    )
    def test_empty_input_always_passes(self, rule: object) -> None:
        assert check(rule, "") is True  # type: ignore[arg-type]
        assert check(rule, None) is True  # type: ignore[arg-type]

    def test_predicate_not_called_for_empty_optional(self) -> None:
        calls: list[str] = []
        rule = predicate(lambda v: calls.append(v) or True, optional=True)
        assert rule.validate("") is True
        assert calls == []

    def test_rule_still_applies_to_non_empty(self) -> None:
        assert check(min_length(10, optional=True), "short") is False


# ---------------------------------------------------------------------------
# Validators are shared, immutable values
# ---------------------------------------------------------------------------


class TestImmutability:
    def test_frozen(self) -> None:
        rule = min_length(3)
        with pytest.raises(AttributeError):
            rule.length = 5  # type: ignore[misc]

    def test_feedback_must_be_string(self) -> None:
        with pytest.raises(ConfigurationError):
            WellFormedEmail(feedback=None)  # type: ignore[arg-type]

    def test_equal_values_compare_equal(self) -> None:
        assert min_length(3, "x") == MinStrLength("x", 3)


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


class TestValidationResult:
    def test_is_valid_no_failures(self) -> None:
        r = ValidationResult(data={"x": "1"}, fields={"x": FieldResult(is_valid=True)})
        assert r.is_valid is True
        assert bool(r) is True
        assert r.errors == {}

    def test_is_valid_with_failure(self) -> None:
        r = ValidationResult(
            data={},
            fields={"x": FieldResult(is_valid=False, feedback=("bad", "worse"))},
        )
        assert r.is_valid is False
        assert not r
        assert r.errors == {"x": ["bad", "worse"]}

    def test_empty_form_is_valid(self) -> None:
        assert ValidationResult(data={}).is_valid is True

    def test_field_result_defaults_to_no_feedback(self) -> None:
        assert FieldResult(is_valid=True).feedback == ()
