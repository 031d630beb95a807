"""Field definitions — the declarative template for one form input.

A definition is read-only and may be shared by any number of forms.
Runtime state (the populated value) lives on ``Field``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from warble.errors import ConfigurationError
from warble.validation.rules import VALIDATOR_TYPES, Validator


class FieldType(StrEnum):
    """HTML input kinds a field can render as."""

    TEXT = "text"
    PASSWORD = "password"
    HIDDEN = "hidden"
    FILE = "file"
    CHECKBOX = "checkbox"
    RADIO = "radio"
    SELECT = "select"
    TEXTAREA = "textarea"


# Types rendered as a plain <input>
INPUT_TYPES = frozenset({FieldType.TEXT, FieldType.PASSWORD, FieldType.HIDDEN, FieldType.FILE})

# Types that read their choices from an options group
OPTION_TYPES = frozenset({FieldType.RADIO, FieldType.SELECT})


@dataclass(frozen=True, slots=True)
class Option:
    """One label/value pair of a radio group or select box."""

    label: str
    value: str

    @classmethod
    def coerce(cls, item: Any) -> Option:
        """Build an Option from an Option, a mapping, or a pair."""
        if isinstance(item, Option):
            return item
        if isinstance(item, Mapping):
            try:
                return cls(label=str(item["label"]), value=str(item["value"]))
            except KeyError as exc:
                msg = f"Option mapping is missing {exc.args[0]!r}: {item!r}"
                raise ConfigurationError(msg) from None
        if isinstance(item, tuple | list) and len(item) == 2:
            return cls(label=str(item[0]), value=str(item[1]))
        msg = f"Cannot build an option from {item!r}"
        raise ConfigurationError(msg)


@dataclass(frozen=True, slots=True)
class FieldDefinition:
    """Declarative description of one form input.

    ``default_value`` is shown before submission; for a checkbox it is
    the value the field takes when checked. ``default_checked`` only
    affects rendering, never the populated value.

    Lists passed for ``options`` and ``validators`` are stored as tuples::

        FieldDefinition(
            label="Favourite colour",
            type="select",
            options=[("Red", "r"), ("Green", "g")],
            validators=[min_length(1, "Pick a colour")],
        )
    """

    label: str
    type: FieldType = FieldType.TEXT
    default_value: str = ""
    default_checked: bool = False
    options: tuple[Option, ...] = ()
    validators: tuple[Validator, ...] = ()

    def __post_init__(self) -> None:
        try:
            kind = FieldType(self.type)
        except ValueError:
            allowed = ", ".join(t.value for t in FieldType)
            msg = f"Unknown field type {self.type!r}; expected one of: {allowed}"
            raise ConfigurationError(msg) from None
        object.__setattr__(self, "type", kind)
        object.__setattr__(self, "default_value", "" if self.default_value is None else str(self.default_value))
        object.__setattr__(self, "default_checked", bool(self.default_checked))
        object.__setattr__(self, "options", tuple(Option.coerce(o) for o in self.options or ()))

        validators = tuple(self.validators or ())
        for rule in validators:
            if not isinstance(rule, VALIDATOR_TYPES):
                msg = f"Field {self.label!r} has a non-validator in its chain: {rule!r}"
                raise ConfigurationError(msg)
        object.__setattr__(self, "validators", validators)

    @property
    def needs_options(self) -> bool:
        """True for radio groups and select boxes."""
        return self.type in OPTION_TYPES

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> FieldDefinition:
        """Build a definition from a plain dict.

        Accepts both snake_case keys and the camelCase keys of older
        field tables (``defaultValue``, ``defaultChecked``, ``optionsGroup``).
        """
        if "type" not in data:
            msg = f"Field definition has no type: {data!r}"
            raise ConfigurationError(msg)
        return cls(
            label=str(data.get("label", "")),
            type=data["type"],
            default_value=_first(data, "default_value", "defaultValue", default=""),
            default_checked=_first(data, "default_checked", "defaultChecked", default=False),
            options=_first(data, "options", "optionsGroup", default=()),
            validators=data.get("validators") or (),
        )


def _first(data: Mapping[str, Any], *keys: str, default: Any) -> Any:
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return default


def coerce_definitions(
    definitions: Mapping[str, FieldDefinition | Mapping[str, Any]],
) -> dict[str, FieldDefinition]:
    """Normalise a definitions table to ``name -> FieldDefinition``."""
    result: dict[str, FieldDefinition] = {}
    for name, definition in definitions.items():
        if isinstance(definition, FieldDefinition):
            result[name] = definition
        elif isinstance(definition, Mapping):
            result[name] = FieldDefinition.from_mapping(definition)
        else:
            msg = f"Field {name!r} must be a FieldDefinition or mapping, got {definition!r}"
            raise ConfigurationError(msg)
    return result
