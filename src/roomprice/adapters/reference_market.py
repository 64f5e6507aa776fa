# src/roomprice/adapters/reference_market.py
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from roomprice.domain.ports import ReferenceListing

# Observed listings shipped with the app until a live market feed is wired in.
REFERENCE_LISTINGS: tuple[ReferenceListing, ...] = (
    # downtown
    ReferenceListing(location="downtown", size=20, room_type="private", price=600),
    ReferenceListing(location="downtown", size=15, room_type="shared", price=400),
    ReferenceListing(location="downtown", size=30, room_type="studio", price=800),
    # university area
    ReferenceListing(location="university", size=18, room_type="private", price=450),
    ReferenceListing(location="university", size=15, room_type="shared", price=300),
    ReferenceListing(location="university", size=25, room_type="studio", price=550),
    # suburb
    ReferenceListing(location="suburb", size=22, room_type="private", price=400),
    ReferenceListing(location="suburb", size=18, room_type="shared", price=250),
    ReferenceListing(location="suburb", size=35, room_type="studio", price=500),
)


@dataclass(frozen=True)
class ReferenceMarketData:
    """
    In-memory market data over a fixed catalogue. Never does I/O, never fails.
    """

    listings: tuple[ReferenceListing, ...] = REFERENCE_LISTINGS

    @classmethod
    def from_records(cls, records: Iterable[ReferenceListing]) -> "ReferenceMarketData":
        return cls(listings=tuple(records))

    def comparables(self, *, location: str, room_type: str) -> list[ReferenceListing]:
        key = location.lower()
        return [
            item
            for item in self.listings
            if item.location.lower() == key and item.room_type == room_type
        ]
