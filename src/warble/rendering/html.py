"""HTML markup for form fields, rows, feedback, and whole forms.

Every function reads a ``FormState`` and returns ``Markup``, so output
can be dropped into a kida template without being escaped twice.

Field values, labels, option labels, and feedback are escaped when
``config.autoescape`` is set. The *attributes* argument is an
extra-attribute string such as ``"class='wide' maxlength='40'"``; it is
inserted verbatim, preceded by a single space.

Markup shapes::

    <input type='text' name='email' id='email' value='a@b.com' />
    <select name='colour'>
    <option value='r' selected='selected'>Red</option>
    </select>
    <tr><td>Email</td><td><input ... /></td></tr>
"""

import html
import logging
from dataclasses import dataclass
from typing import Any, Literal

from kida.template import Markup

from warble.errors import ConfigurationError
from warble.forms.definitions import INPUT_TYPES, FieldType
from warble.forms.field import Field
from warble.forms.state import FormState

logger = logging.getLogger("warble.rendering")


def _escape(value: Any, autoescape: bool = True) -> str:
    """Escape *value* for HTML unless it is already markup."""
    if hasattr(value, "__html__"):
        return str(value.__html__())
    if not autoescape:
        return str(value)
    return html.escape(str(value), quote=True)


def _attrs(attributes: str) -> str:
    attributes = attributes.strip()
    return f" {attributes}" if attributes else ""


# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------


def _input(field: Field, attributes: str, esc: bool) -> str:
    name = _escape(field.name, esc)
    value = _escape(field.display_value, esc)
    return f"<input type='{field.type.value}' name='{name}' id='{name}' value='{value}'{attributes} />"


def _checkbox(field: Field, attributes: str, esc: bool) -> str:
    if field.is_checked:
        attributes += " checked='checked'"
    return _input(field, attributes, esc)


def _radio(field: Field, attributes: str, esc: bool) -> str:
    if not field.options:
        logger.warning("No options found for radio button group named: %r", field.name)
        return ""
    name = _escape(field.name, esc)
    lines: list[str] = []
    for option in field.options:
        checked = " checked='checked'" if option.value == field.value else ""
        lines.append(
            f"<label><input type='radio' name='{name}' value='{_escape(option.value, esc)}'"
            f"{attributes}{checked} /> {_escape(option.label, esc)}</label><br />"
        )
    return "\n".join(lines)


def _select(field: Field, attributes: str, esc: bool) -> str:
    if not field.options:
        logger.warning("No options found for select box named: %r", field.name)
    lines = [f"<select name='{_escape(field.name, esc)}'{attributes}>"]
    for option in field.options:
        selected = " selected='selected'" if option.value == field.value else ""
        lines.append(
            f"<option value='{_escape(option.value, esc)}'{selected}>{_escape(option.label, esc)}</option>"
        )
    lines.append("</select>")
    return "\n".join(lines)


def _textarea(field: Field, attributes: str, esc: bool) -> str:
    body = _escape(field.display_value, esc)
    return f"<textarea name='{_escape(field.name, esc)}'{attributes}>{body}</textarea>"


def field_html(form: FormState, name: str, attributes: str = "") -> Markup:
    """Return the input markup for one field, chosen by its type.

    Raises:
        UnknownFieldError: If the form has no such field.
    """
    field = form.get_field(name)
    esc = form.config.autoescape
    attrs = _attrs(attributes)

    match field.type:
        case kind if kind in INPUT_TYPES:
            out = _input(field, attrs, esc)
        case FieldType.CHECKBOX:
            out = _checkbox(field, attrs, esc)
        case FieldType.RADIO:
            out = _radio(field, attrs, esc)
        case FieldType.SELECT:
            out = _select(field, attrs, esc)
        case FieldType.TEXTAREA:
            out = _textarea(field, attrs, esc)
        case _:
            msg = f"Cannot render field type {field.type!r}"
            raise ConfigurationError(msg)
    return Markup(out)


# ---------------------------------------------------------------------------
# Rows and feedback
# ---------------------------------------------------------------------------


def field_row(form: FormState, name: str, attributes: str = "") -> Markup:
    """Return a table row for the field, preceded by one row per feedback message."""
    esc = form.config.autoescape
    color = _escape(form.config.feedback_color, esc)
    parts = [
        f"<tr><td colspan='2'><span style='color:{color}'>{_escape(message, esc)}</span></td></tr>\n"
        for message in form.get_field_error_feedback(name)
    ]
    label = _escape(form.get_field_label(name), esc)
    parts.append(f"<tr><td>{label}</td><td>{field_html(form, name, attributes)}</td></tr>\n")
    return Markup("".join(parts))


def field_feedback(form: FormState, name: str) -> Markup:
    """Return one ``<div class='feedback'>`` per feedback message."""
    esc = form.config.autoescape
    return Markup(
        "".join(
            f"<div class='feedback'>{_escape(message, esc)}</div>\n"
            for message in form.get_field_error_feedback(name)
        )
    )


# ---------------------------------------------------------------------------
# Whole forms
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class SubmitButton:
    """The submit control rendered at the bottom of ``form_html()``.

    ``type="image"`` renders a graphical button and needs ``src``.
    """

    label: str = "Submit"
    type: Literal["submit", "image"] = "submit"
    src: str | None = None
    css_class: str | None = None
    id: str | None = None
    attributes: str = ""

    def __post_init__(self) -> None:
        if self.type not in ("submit", "image"):
            msg = f"Submit button type must be 'submit' or 'image', got {self.type!r}"
            raise ConfigurationError(msg)
        if self.type == "image" and not self.src:
            msg = "Image submit buttons need a src"
            raise ConfigurationError(msg)


def submit_html(button: SubmitButton | None = None, *, autoescape: bool = True) -> Markup:
    """Return the markup for a submit control."""
    button = button or SubmitButton()
    parts = [f"<input type='{button.type}'"]
    if button.type == "image":
        parts.append(f" src='{_escape(button.src, autoescape)}' alt='{_escape(button.label, autoescape)}'")
    else:
        parts.append(f" value='{_escape(button.label, autoescape)}'")
    if button.css_class:
        parts.append(f" class='{_escape(button.css_class, autoescape)}'")
    if button.id:
        parts.append(f" id='{_escape(button.id, autoescape)}'")
    parts.append(f"{_attrs(button.attributes)} />")
    return Markup("".join(parts))


def form_html(
    form: FormState,
    action: str,
    *,
    method: str = "POST",
    name: str | None = None,
    multipart: bool | None = None,
    attributes: str = "",
    submit: SubmitButton | None = None,
) -> Markup:
    """Return a complete ``<form>``: a table of rows in ``fields_order``, then the submit control.

    Args:
        form: The form to render.
        action: URL the form posts to.
        method: HTTP method for the ``method`` attribute.
        name: Sets both ``name`` and ``id`` on the form element.
        multipart: Add ``enctype='multipart/form-data'``. ``None`` adds it
            when the form has a file input.
        attributes: Extra attribute string for the form element.
        submit: Submit control; a plain "Submit" button by default.
    """
    esc = form.config.autoescape
    if multipart is None:
        multipart = any(f.type is FieldType.FILE for f in form.fields.values())

    head = [f"<form action='{_escape(action, esc)}' method='{_escape(method, esc)}'"]
    if name:
        head.append(f" name='{_escape(name, esc)}' id='{_escape(name, esc)}'")
    if multipart:
        head.append(" enctype='multipart/form-data'")
    head.append(f"{_attrs(attributes)}>\n")

    rows = "".join(field_row(form, field_name) for field_name in form.fields_order)
    return Markup(
        "".join(head)
        + f"<table>\n{rows}</table>\n"
        + f"{submit_html(submit, autoescape=esc)}\n"
        + "</form>\n"
    )
