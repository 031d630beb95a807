"""HTML rendering for warble forms."""

from warble.rendering.filters import FORM_FILTERS
from warble.rendering.html import (
    SubmitButton,
    field_feedback,
    field_html,
    field_row,
    form_html,
    submit_html,
)

__all__ = [
    "FORM_FILTERS",
    "SubmitButton",
    "field_feedback",
    "field_html",
    "field_row",
    "form_html",
    "submit_html",
]
