# src/roomprice/domain/ports.py
from __future__ import annotations

from typing import Protocol

from pydantic import BaseModel, ConfigDict, Field

from roomprice.domain.features import RoomType


# ----------------------------
# Market reference records
# ----------------------------

class ReferenceListing(BaseModel):
    """An observed listing used for similarity counting and market averages."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    location: str
    size: float = Field(..., gt=0)
    room_type: RoomType
    price: float = Field(..., gt=0)


# ----------------------------
# Market data provider
# ----------------------------

class MarketDataSource(Protocol):
    def comparables(self, *, location: str, room_type: str) -> list[ReferenceListing]:
        """
        Listings for a (location, room type) bucket.

        Implementations may return a superset; callers filter again.
        """
        ...
