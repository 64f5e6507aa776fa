# src/roomprice/analysis/market.py
from __future__ import annotations

from collections.abc import Iterable

from roomprice.analysis.valuation import round_half_up
from roomprice.domain.features import RoomFeatures
from roomprice.domain.prediction import MarketComparison
from roomprice.domain.ports import ReferenceListing
from roomprice.domain.weights import PricingWeights


def _same_bucket(item: ReferenceListing, location: str, room_type: str) -> bool:
    return item.location.lower() == location.lower() and item.room_type == room_type


def count_similar(
    features: RoomFeatures,
    listings: Iterable[ReferenceListing],
    *,
    size_tolerance: float = 10.0,
) -> int:
    """
    Listings in the same (location, room type) bucket whose size is within
    size_tolerance square meters (exclusive). Location matching is on the raw
    label, not on the multiplier fallback.
    """
    return sum(
        1
        for item in listings
        if _same_bucket(item, features.location, features.room_type)
        and abs(item.size - features.size) < size_tolerance
    )


def market_average(
    location: str,
    room_type: str,
    listings: Iterable[ReferenceListing],
    *,
    default: int = 400,
) -> int:
    """Mean price of the bucket, rounded; `default` when the bucket is empty."""
    prices = [item.price for item in listings if _same_bucket(item, location, room_type)]
    if not prices:
        return default
    return round_half_up(sum(prices) / len(prices))


def compare_to_market(
    predicted_price: float,
    average: float,
    *,
    fair_band: float = 0.10,
) -> MarketComparison:
    # boundaries count as fair
    if predicted_price < average * (1 - fair_band):
        return "below"
    if predicted_price > average * (1 + fair_band):
        return "above"
    return "fair"


def confidence_from_similar(similar_count: int, weights: PricingWeights) -> int:
    return min(
        weights.confidence_cap,
        weights.confidence_base + similar_count * weights.confidence_per_similar,
    )
