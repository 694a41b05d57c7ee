"""Lenient parsing of dollar amounts typed into the entry form."""

from __future__ import annotations

import re

_NOT_NUMERIC = re.compile(r"[^0-9.]")
_LEADING_NUMBER = re.compile(r"^\d*\.?\d+|^\d+\.?")


def parse_currency(value: str) -> float:
    """Read ``"$1,529,264.25"`` as ``1529264.25``.

    Everything except digits and dots is dropped, then the longest leading
    number is taken. Signs are dropped too, and input with no digits reads
    as 0.
    """
    cleaned = _NOT_NUMERIC.sub("", value)
    match = _LEADING_NUMBER.match(cleaned)
    if match is None:
        return 0.0
    return float(match.group(0))
