"""Form filters for kida templates.

Register them on an Environment to render fields from templates::

    env.update_filters(FORM_FILTERS)

    <table>
      {{ form | field_row("email", "size='40'") }}
    </table>
    {% for msg in form | field_errors("email") %}
      <p class="error">{{ msg }}</p>
    {% end %}
"""

from typing import Any

from kida.template import Markup

from warble.forms.state import FormState
from warble.rendering.html import field_feedback, field_html, field_row


def field_errors(form: FormState | None, name: str) -> list[str]:
    """Feedback messages for one field; empty when *form* is None."""
    if form is None:
        return []
    return form.get_field_error_feedback(name)


def field_label(form: FormState, name: str) -> str | Markup:
    """The field's label (checkbox labels come wrapped in ``<label>``)."""
    return form.get_field_label(name)


FORM_FILTERS: dict[str, Any] = {
    "field_errors": field_errors,
    "field_feedback": field_feedback,
    "field_html": field_html,
    "field_label": field_label,
    "field_row": field_row,
}
