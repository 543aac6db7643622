from __future__ import annotations

"""Simple reusable helper functions.

These helpers are side-effect-free and contain no GUI or disk I/O; they turn
raw form-field text into rule values and back.
"""

import re
from typing import Iterable, Optional, Tuple, Union

__all__ = [
    "parse_allowed_values",
    "format_allowed_values",
    "parse_bound",
    "format_bound",
]

# ASCII decimal literals only
_INT_RE = re.compile(r"[+-]?[0-9]+")
_NUMBER_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse_allowed_values(text: Optional[str]) -> Tuple[str, ...]:
    """Split comma-separated *text* into trimmed, non-empty values.

    >>> parse_allowed_values(" a, b ,, c")
    ('a', 'b', 'c')
    """
    if not text:
        return ()
    return tuple(part.strip() for part in text.split(",") if part.strip())


def format_allowed_values(values: Optional[Iterable[str]]) -> str:
    """Inverse of :func:`parse_allowed_values` for display in the form."""
    if values is None:
        return ""
    return ", ".join(values)


def parse_bound(text: Optional[str]) -> Optional[Union[int, float]]:
    """Convert a min/max field to a number.

    Blank input means "no bound" and yields None. Integer literals stay
    ``int``; anything else numeric becomes ``float``.

    Raises
    ------
    ValueError
        If *text* is not blank and not a finite number.
    """
    if text is None:
        return None
    raw = text.strip()
    if not raw:
        return None
    if _INT_RE.fullmatch(raw):
        return int(raw)
    if not _NUMBER_RE.fullmatch(raw):
        raise ValueError(f"not a number: {text!r}")
    value = float(raw)
    if value in (float("inf"), float("-inf")):
        raise ValueError(f"not a finite number: {text!r}")
    return value


def format_bound(value: Optional[Union[int, float]]) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
