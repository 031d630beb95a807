"""Submitted values — the already-decoded request data a form is built from.

Parsing request bodies is the web framework's job. Warble accepts what
the framework hands over: a plain dict, a multi-valued mapping such as
a ``FormData`` or ``QueryParams``, or a dict of value lists as produced
by ``urllib.parse.parse_qs``.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class MultiValued(Protocol):
    """Submitted data that can hold several values per field name.

    Only the keys and ``get_list`` are read; any ``FormData``-style object
    qualifies.
    """

    def __iter__(self) -> Iterator[str]: ...
    def get_list(self, key: str) -> list[str]: ...


type Submitted = Mapping[str, Any] | MultiValued


def submitted_values(data: Submitted | None) -> dict[str, str]:
    """Flatten submitted data to ``name -> str``, first value wins.

    ``None`` entries, empty value lists, and falsy non-string values
    (``False``, ``0``) are dropped, so they read as "not submitted".
    Other non-string scalars are converted with ``str()``.

    Usage::

        submitted_values({"tags": ["a", "b"], "name": "bob"})
        # {"tags": "a", "name": "bob"}
    """
    if not data:
        return {}

    result: dict[str, str] = {}
    for key in data:
        if isinstance(data, MultiValued):
            values = data.get_list(key)
            value = values[0] if values else None
        else:
            value = data[key]
            if isinstance(value, list | tuple):
                value = value[0] if value else None
        if value is None or (not isinstance(value, str) and not value):
            continue
        result[key] = value if isinstance(value, str) else str(value)
    return result
