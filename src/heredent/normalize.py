"""Template normalization: indentation-aware interleaving, dedent, and trim."""

from __future__ import annotations

from collections.abc import Sequence

_HSPACE = " \t"


def normalize(segments: Sequence[str], values: Sequence[object]) -> str:
    """Merge literal segments and values into one dedented block of text.

    Algorithm:
    1. Stringify each value (``None`` becomes the empty string).
    2. Interleave segments and values. A multi-line value gets the indent
       of its insertion point re-inserted after each of its newlines.
    3. Normalize ``\\r\\n`` and ``\\r`` to ``\\n`` and split into lines.
    4. Drop leading and trailing blank lines.
    5. Remove the common space/tab margin of the non-blank lines.
    6. Strip trailing spaces and tabs from every line.
    7. Collapse runs of blank lines to a single blank line.

    Values beyond ``len(segments) - 1`` are ignored and missing values are
    treated as omitted, so the function never fails on a count mismatch.
    """
    lines = _split_lines(interleave(segments, values))

    start = 0
    while start < len(lines) and _is_blank(lines[start]):
        start += 1
    end = len(lines)
    while end > start and _is_blank(lines[end - 1]):
        end -= 1
    lines = lines[start:end]

    if not lines:
        return ""

    margin = common_margin(lines)

    result: list[str] = []
    for line in lines:
        line = _dedent_line(line, margin).rstrip(_HSPACE)
        # At most one empty line in a row
        if not line and result and not result[-1]:
            continue
        result.append(line)

    return "\n".join(result)


def interleave(segments: Sequence[str], values: Sequence[object]) -> str:
    """Concatenate segments and values, aligning multi-line values.

    Returns the raw concatenation, before any trimming or dedenting.
    """
    parts: list[str] = []
    for i, segment in enumerate(segments):
        parts.append(segment)
        if i < len(values) and i < len(segments) - 1:
            parts.append(_insert_value(values[i], local_indent(segment)))
    return "".join(parts)


def local_indent(segment: str) -> str:
    """Return the indentation in effect at the end of *segment*.

    This is the trailing run of spaces and tabs, but only when that run
    starts at a line break or at the beginning of the segment. Text on the
    same line before the run yields no indent.
    """
    i = len(segment)
    while i > 0 and segment[i - 1] in _HSPACE:
        i -= 1
    if i == 0 or segment[i - 1] in "\r\n":
        return segment[i:]
    return ""


def common_margin(lines: Sequence[str]) -> int:
    """Return the smallest leading space/tab width among non-blank lines."""
    widths = [_leading_width(line) for line in lines if not _is_blank(line)]
    return min(widths) if widths else 0


def _insert_value(value: object, indent: str) -> str:
    text = "" if value is None else str(value)
    text = _normalize_newlines(text)
    if "\n" in text:
        text = text.replace("\n", "\n" + indent)
    return text


def _normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def _split_lines(text: str) -> list[str]:
    return _normalize_newlines(text).split("\n")


def _leading_width(line: str) -> int:
    n = 0
    while n < len(line) and line[n] in _HSPACE:
        n += 1
    return n


def _dedent_line(line: str, margin: int) -> str:
    """Remove up to *margin* leading spaces/tabs from *line*."""
    return line[min(margin, _leading_width(line)) :]


def _is_blank(line: str) -> bool:
    """Return True if line has no content once stripped of whitespace."""
    return not line.strip()
