"""Form configuration.

FormConfig is a frozen dataclass — immutable after creation, shared
freely between forms, no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FormConfig:
    """Form behaviour switches. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = FormConfig(strict_fields=False, feedback_color="#c00")
    """

    # Unknown names passed to set_field_value() raise when True,
    # otherwise they are ignored (legacy behaviour).
    strict_fields: bool = True

    # Radio/select definitions without options fail at FormState
    # construction when True, otherwise render empty with a warning.
    strict_options: bool = True

    # Rendering
    autoescape: bool = True
    feedback_color: str = "#ff3300"
