"""Component key normalisation for user-entered labels."""

from __future__ import annotations

import re

_NON_ALNUM = re.compile(r"[^a-z0-9\s]")
_SPACE_THEN_WORD = re.compile(r"\s+(\w)")
_UPPER = re.compile(r"([A-Z])")


def normalize_key(label: str) -> str:
    """Turn a display label into a camelCase component key.

    Surrounding whitespace is dropped, so ``"Admin time "`` and
    ``"Admin time"`` map to the same key.

    >>> normalize_key("Medical Directorship")
    'medicalDirectorship'
    """
    key = _NON_ALNUM.sub("", label.lower())
    key = _SPACE_THEN_WORD.sub(lambda m: m.group(1).upper(), key).strip()
    return key[:1].lower() + key[1:]


def title_case(key: str) -> str:
    """Inverse of :func:`normalize_key` for labels: ``"medicalDirectorship"`` -> ``"Medical Directorship"``."""
    spaced = _UPPER.sub(r" \1", key)
    return (spaced[:1].upper() + spaced[1:]).strip()
