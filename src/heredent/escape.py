"""HTML escaping for interpolated values."""

from __future__ import annotations

_ENTITIES: dict[str, str] = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#039;",
}


def escape(value: object) -> str:
    """Escape markup-significant characters. ``None`` becomes the empty string."""
    if value is None:
        return ""
    result: list[str] = []
    for ch in str(value):
        result.append(_ENTITIES.get(ch, ch))
    return "".join(result)
