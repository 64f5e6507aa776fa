# src/roomprice/analysis/valuation.py
from __future__ import annotations

import math

from roomprice.domain.features import RoomFeatures
from roomprice.domain.prediction import PriceRange
from roomprice.domain.weights import PricingWeights


def round_half_up(value: float) -> int:
    """Round to the nearest integer, .5 going up (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(value + 0.5))


def round_to_step(value: float, step: int) -> int:
    return round_half_up(value / step) * step


def compute_base_price(features: RoomFeatures, weights: PricingWeights) -> int:
    """
    Monthly price estimate before range, confidence and insights.

    The order matters: size is added before the room-type and location
    multipliers scale the running total; amenities, distance and floor are
    added on top of the scaled value.
    """
    price = weights.base_price
    price += features.size * weights.price_per_sqm

    price *= weights.room_type_multipliers[features.room_type]
    price *= weights.location_multiplier(features.area)

    for name, bonus in weights.amenity_bonuses.items():
        if getattr(features, name):
            price += bonus

    price += features.distance_to_university * weights.distance_penalty_per_km

    if features.floor > weights.floor_bonus_threshold:
        price += (features.floor - weights.floor_bonus_threshold) * weights.floor_bonus_per_level

    return round_to_step(price, weights.rounding_step)


def price_range(predicted_price: int, weights: PricingWeights) -> PriceRange:
    return PriceRange(
        min=round_half_up(predicted_price * weights.range_low_factor),
        max=round_half_up(predicted_price * weights.range_high_factor),
    )
