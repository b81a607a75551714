"""Format-string templates: split into segments and fields, then normalize."""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Any

from heredent.normalize import normalize

_FORMATTER = string.Formatter()


@dataclass(frozen=True, slots=True)
class Field:
    """A replacement field of a template, as written between braces."""

    name: str
    conversion: str | None
    format_spec: str


def split_template(template: str) -> tuple[list[str], list[Field]]:
    """Split a ``str.format`` template into literal segments and fields.

    There is always exactly one more segment than fields. ``{{`` and ``}}``
    come back as literal braces. Malformed templates raise ValueError.
    """
    segments: list[str] = []
    fields: list[Field] = []
    pending = ""
    for literal, name, spec, conversion in _FORMATTER.parse(template):
        pending += literal
        if name is None:
            continue
        segments.append(pending)
        pending = ""
        fields.append(Field(name, conversion, spec or ""))
    segments.append(pending)
    return segments, fields


def html(template: str, /, *args: Any, **kwargs: Any) -> str:
    """Fill *template* like ``str.format`` and normalize the result.

    Multi-line values are aligned with the column they are inserted at.
    A field that resolves to ``None`` without a format spec contributes
    nothing. No escaping is done here.
    """
    segments, fields = split_template(template)
    values: list[object] = []
    auto_index = 0
    numbering: str | None = None
    for f in fields:
        name = f.name
        if name == "" or name[0] in ".[":
            if numbering == "manual":
                raise ValueError(
                    "cannot switch from manual field specification to automatic field numbering"
                )
            numbering = "auto"
            name = f"{auto_index}{name}"
            auto_index += 1
        elif name[0].isdigit():
            if numbering == "auto":
                raise ValueError(
                    "cannot switch from automatic field numbering to manual field specification"
                )
            numbering = "manual"
        obj, _ = _FORMATTER.get_field(name, args, kwargs)
        if obj is None and not f.format_spec and f.conversion is None:
            values.append(None)
            continue
        obj = _FORMATTER.convert_field(obj, f.conversion)
        spec = f.format_spec
        if "{" in spec:
            # Nested fields inside the spec, e.g. "{name:>{width}}"
            spec = _FORMATTER.vformat(spec, args, kwargs)
        values.append(_FORMATTER.format_field(obj, spec))
    return normalize(segments, values)
