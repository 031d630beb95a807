"""Tests for warble.errors — exception hierarchy and error messages."""

import pytest

from warble.errors import ConfigurationError, PredicateError, UnknownFieldError, WarbleError
from warble.validation import predicate


class TestHierarchy:
    def test_configuration_error_is_warble_error(self) -> None:
        assert issubclass(ConfigurationError, WarbleError)

    def test_predicate_error_is_configuration_error(self) -> None:
        assert issubclass(PredicateError, ConfigurationError)

    def test_unknown_field_is_lookup_error(self) -> None:
        assert issubclass(UnknownFieldError, WarbleError)
        assert issubclass(UnknownFieldError, LookupError)


class TestMessages:
    def test_unknown_field(self) -> None:
        err = UnknownFieldError("email")
        assert err.name == "email"
        assert str(err) == "Unknown form field: 'email'"

    def test_predicate_error_names_function(self) -> None:
        def is_unique(value: str) -> bool:
            raise OSError("db down")

        rule = predicate(is_unique)
        err = PredicateError(rule, "bob")
        assert "is_unique" in str(err)
        assert "'bob'" in str(err)
        assert err.value == "bob"

    def test_catchable_as_base(self) -> None:
        with pytest.raises(WarbleError):
            raise UnknownFieldError("x")
