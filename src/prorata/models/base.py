"""Shared pydantic base for models exchanged with the calculator front end."""

from __future__ import annotations

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake_case fields in Python, camelCase keys on the wire."""

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "str_strip_whitespace": True,
    }


class FrozenCamelModel(CamelModel):
    """Input record the engine reads but never mutates."""

    model_config = {"frozen": True}
