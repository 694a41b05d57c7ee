"""Type aliases used across the prorata package."""

from __future__ import annotations

from typing import Annotated

from pydantic import StringConstraints

ComponentKey = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
PeriodId = str
ItemId = str
Amount = float
SplitMap = dict[ComponentKey, float | None]
TotalsMap = dict[str, Amount]
