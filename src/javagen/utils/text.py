"""String helpers shared by the entity renderers and builders.

Blank means ``None``, empty, or whitespace-only. Line joining never adds a
trailing newline; callers that need one append an empty line first.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence


def is_blank(value: Optional[str]) -> bool:
    """Return True when *value* is None, empty, or only whitespace."""
    return value is None or not value.strip()


def is_not_blank(value: Optional[str]) -> bool:
    return not is_blank(value)


def any_not_blank(*values: Optional[str]) -> bool:
    """Return True if at least one of *values* carries text."""
    return any(is_not_blank(v) for v in values)


def has_items(items: Optional[Sequence]) -> bool:
    """Return True for a non-None, non-empty sequence."""
    return bool(items)


def join_lines(lines: Iterable[str]) -> str:
    return "\n".join(lines)


def indent_all_lines(text: str, indent: str = "\t") -> str:
    """Prefix every line of *text* with *indent*, including empty ones.

    A trailing newline yields a final indent-only line, e.g.
    ``"a\\n"`` becomes ``"\\ta\\n\\t"``.
    """
    return join_lines(indent + line for line in text.split("\n"))
