# src/roomprice/analysis/insights.py
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from roomprice.domain.features import RoomFeatures

# Messages are plain text. Icons are added by whatever renders them.

# thresholds
NEAR_CAMPUS_KM = 2.0
FAR_FROM_CAMPUS_KM = 5.0
SPACIOUS_SQM = 25.0
COMPACT_SQM = 15.0
WELL_EQUIPPED_MIN = 5
LIMITED_AMENITIES_MAX = 2


def _percent_vs_market(predicted_price: float, average: float) -> int:
    # half away from zero, so -37.5 reports as 38% below
    pct = (predicted_price - average) / average * 100
    return int(Decimal(pct).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def _format_km(km: float) -> str:
    return str(int(km)) if float(km).is_integer() else repr(float(km))


def generate_insights(
    features: RoomFeatures,
    predicted_price: float,
    average: float,
) -> tuple[str, ...]:
    """
    Short justifications for a prediction, always in this order:

      1. price vs market average (always present)
      2. distance to university
      3. room size
      4. amenities
      5. room type

    Each check is independent; 1 to 5 entries are returned.
    """
    insights: list[str] = []

    # 1. price vs market
    pct = _percent_vs_market(predicted_price, average)
    if predicted_price > average:
        insights.append(f"This price is {pct}% above market average for this area")
    elif predicted_price < average:
        insights.append(f"This is a great deal! {abs(pct)}% below market average")
    else:
        insights.append("Fair market price for this location and features")

    # 2. location
    distance = features.distance_to_university
    if distance < NEAR_CAMPUS_KM:
        insights.append("Excellent location - walking distance to university")
    elif distance > FAR_FROM_CAMPUS_KM:
        insights.append(f"Consider transportation costs - {_format_km(distance)}km from campus")

    # 3. size
    if features.size > SPACIOUS_SQM:
        insights.append("Spacious room - larger than average")
    elif features.size < COMPACT_SQM:
        insights.append("Compact room - consider if space is important to you")

    # 4. amenities (pets policy not counted)
    amenities = features.amenity_count
    if amenities >= WELL_EQUIPPED_MIN:
        insights.append(f"Fully equipped with {amenities} amenities")
    elif amenities <= LIMITED_AMENITIES_MAX:
        insights.append("Limited amenities - you may need to budget for extras")

    # 5. room type
    if features.room_type == "shared":
        insights.append("Shared room - budget-friendly option")
    elif features.room_type == "studio":
        insights.append("Private studio - complete independence")

    return tuple(insights)
