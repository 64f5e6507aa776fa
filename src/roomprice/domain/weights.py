# src/roomprice/domain/weights.py
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from roomprice.domain.features import ROOM_TYPES, Area


def _default_room_type_multipliers() -> dict[str, float]:
    return {"private": 1.2, "shared": 0.7, "studio": 1.4}


def _default_location_multipliers() -> dict[Area, float]:
    return {
        Area.DOWNTOWN: 1.3,
        Area.UNIVERSITY: 1.1,
        Area.SUBURB: 0.9,
        Area.UPTOWN: 1.2,
        Area.CAMPUS: 1.15,
        Area.OTHER: 1.0,
    }


def _default_amenity_bonuses() -> dict[str, float]:
    # Applied in this order. pets_allowed lowers the value.
    return {
        "furnished": 100.0,
        "has_wifi": 30.0,
        "has_parking": 50.0,
        "has_kitchen": 40.0,
        "has_laundry": 35.0,
        "has_balcony": 45.0,
        "pets_allowed": -20.0,
    }


class PricingWeights(BaseModel):
    """
    Weight tables and thresholds of the valuation model.

    Injected into the predictor so tests and alternative markets can swap
    them without touching the pipeline.
    """

    model_config = ConfigDict(frozen=True)

    base_price: float = 200.0
    price_per_sqm: float = 8.0
    room_type_multipliers: dict[str, float] = Field(default_factory=_default_room_type_multipliers)
    location_multipliers: dict[Area, float] = Field(default_factory=_default_location_multipliers)
    amenity_bonuses: dict[str, float] = Field(default_factory=_default_amenity_bonuses)
    distance_penalty_per_km: float = -15.0
    floor_bonus_threshold: int = 3
    floor_bonus_per_level: float = 10.0
    rounding_step: int = Field(default=10, gt=0)

    # range / tiers
    range_low_factor: float = 0.85
    range_high_factor: float = 1.15
    budget_factor: float = 0.9

    # market comparison
    fair_band: float = Field(default=0.10, ge=0)
    default_market_average: int = Field(default=400, gt=0)
    similar_size_tolerance: float = 10.0

    # confidence
    confidence_base: int = 60
    confidence_per_similar: int = 5
    confidence_cap: int = 95

    @model_validator(mode="after")
    def _check_tables(self) -> "PricingWeights":
        missing = [rt for rt in ROOM_TYPES if rt not in self.room_type_multipliers]
        if missing:
            raise ValueError(f"room_type_multipliers missing: {missing}")
        if Area.OTHER not in self.location_multipliers:
            raise ValueError("location_multipliers must define the 'other' fallback")
        if not self.range_low_factor < 1.0 < self.range_high_factor:
            raise ValueError("range factors must straddle 1.0")
        if self.confidence_cap < self.confidence_base:
            raise ValueError("confidence_cap must be >= confidence_base")
        return self

    def location_multiplier(self, area: Area) -> float:
        return self.location_multipliers.get(area, self.location_multipliers[Area.OTHER])
