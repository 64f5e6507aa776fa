# src/roomprice/domain/features.py
from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Closed set: anything else is rejected at validation time.
RoomType = Literal["private", "shared", "studio"]

ROOM_TYPES: tuple[str, ...] = ("private", "shared", "studio")

# Amenities counted towards "fully equipped" / "limited amenities".
# pets_allowed is a listing policy, not an amenity.
AMENITY_FIELDS: tuple[str, ...] = (
    "furnished",
    "has_wifi",
    "has_parking",
    "has_kitchen",
    "has_laundry",
    "has_balcony",
)


class Area(str, Enum):
    """
    Named areas with a known price multiplier.

    Unlike room types, an unrecognized location label is not an error: it maps
    to OTHER and prices with the neutral multiplier.
    """

    DOWNTOWN = "downtown"
    UNIVERSITY = "university"
    SUBURB = "suburb"
    UPTOWN = "uptown"
    CAMPUS = "campus"
    OTHER = "other"

    @classmethod
    def from_label(cls, label: str) -> "Area":
        try:
            return cls(label.lower())
        except ValueError:
            return cls.OTHER


class RoomFeatures(BaseModel):
    """
    Attributes of a room offered for rent.

    Accepts both snake_case names and the camelCase names used by the listing
    front end (``roomType``, ``hasWifi``, ``distanceToUniversity``...).
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        allow_inf_nan=False,
    )

    location: str = Field(..., description="Free-form area label, e.g. 'downtown'")
    size: float = Field(..., gt=0, description="Room size in square meters")
    room_type: RoomType

    furnished: bool = False
    has_wifi: bool = False
    has_parking: bool = False
    has_kitchen: bool = False
    has_laundry: bool = False
    has_balcony: bool = False
    pets_allowed: bool = False

    distance_to_university: float = Field(..., ge=0, description="Kilometers")
    floor: int = Field(default=0, ge=0)

    @property
    def location_key(self) -> str:
        return self.location.lower()

    @property
    def area(self) -> Area:
        return Area.from_label(self.location)

    @property
    def amenity_count(self) -> int:
        return sum(1 for name in AMENITY_FIELDS if getattr(self, name))
