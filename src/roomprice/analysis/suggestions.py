# src/roomprice/analysis/suggestions.py
from __future__ import annotations

from roomprice.analysis.valuation import round_half_up
from roomprice.domain.prediction import PriceAssessment, PricePrediction, SuggestedPriceTiers


def suggest_tiers(prediction: PricePrediction, *, budget_factor: float = 0.9) -> SuggestedPriceTiers:
    return SuggestedPriceTiers(
        recommended=prediction.predicted_price,
        competitive=prediction.price_range.min,
        premium=prediction.price_range.max,
        budget=round_half_up(prediction.predicted_price * budget_factor),
    )


def assess_price(prediction: PricePrediction, asking_price: float) -> PriceAssessment:
    """
    Classify an owner's asking price against the predicted range.

    Range bounds are inclusive: asking exactly range.min or range.max is "good".
    """
    rng = prediction.price_range
    if asking_price < rng.min:
        status = "low"
    elif asking_price > rng.max:
        status = "high"
    else:
        status = "good"

    return PriceAssessment(
        status=status,
        asking_price=asking_price,
        predicted_price=prediction.predicted_price,
        delta=prediction.predicted_price - asking_price,
        price_range=rng,
    )
