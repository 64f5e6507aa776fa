# src/roomprice/domain/prediction.py
from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

MarketComparison = Literal["below", "fair", "above"]
PriceStatus = Literal["low", "good", "high"]


class _Result(BaseModel):
    # camelCase on the wire, snake_case in Python
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class PriceRange(_Result):
    min: int
    max: int


class PricePrediction(_Result):
    predicted_price: int
    confidence: int = Field(..., ge=0, le=100)
    price_range: PriceRange
    market_comparison: MarketComparison
    insights: tuple[str, ...]
    similar_listings: int = Field(..., ge=0)
    market_average: int


class SuggestedPriceTiers(_Result):
    recommended: int
    competitive: int
    premium: int
    budget: int


class PriceAssessment(_Result):
    """Where an owner's asking price sits relative to the predicted range."""

    status: PriceStatus
    asking_price: float
    predicted_price: int
    delta: float  # predicted - asking; positive means room to raise
    price_range: PriceRange
