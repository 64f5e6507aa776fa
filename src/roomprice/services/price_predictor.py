from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from roomprice.adapters.config import AppConfig, config
from roomprice.adapters.logging_utils import get_logger, log_context
from roomprice.adapters.market_api import make_market_data_client
from roomprice.adapters.reference_market import ReferenceMarketData
from roomprice.analysis.insights import generate_insights
from roomprice.analysis.market import (
    compare_to_market,
    confidence_from_similar,
    count_similar,
    market_average,
)
from roomprice.analysis.suggestions import assess_price, suggest_tiers
from roomprice.analysis.valuation import compute_base_price, price_range
from roomprice.domain.features import RoomFeatures
from roomprice.domain.ports import MarketDataSource
from roomprice.domain.prediction import PriceAssessment, PricePrediction, SuggestedPriceTiers
from roomprice.domain.weights import PricingWeights
from roomprice.services.validation import validate_features

logger = get_logger(__name__)

FeaturesInput = RoomFeatures | Mapping[str, Any]


class PricePredictor:
    """
    Rule-based monthly rent valuation for a room.

    Holds only immutable collaborators (weights + market data source), so a
    single instance can serve concurrent callers.
    """

    def __init__(
        self,
        market: MarketDataSource | None = None,
        weights: PricingWeights | None = None,
    ) -> None:
        self.market: MarketDataSource = market if market is not None else ReferenceMarketData()
        self.weights = weights if weights is not None else PricingWeights()

    # ------------------------------------------------------------------
    # Building blocks
    # ------------------------------------------------------------------
    def count_similar(self, features: FeaturesInput) -> int:
        feats = validate_features(features)
        listings = self.market.comparables(location=feats.location, room_type=feats.room_type)
        return count_similar(feats, listings, size_tolerance=self.weights.similar_size_tolerance)

    def market_average(self, location: str, room_type: str) -> int:
        listings = self.market.comparables(location=location, room_type=room_type)
        return market_average(
            location,
            room_type,
            listings,
            default=self.weights.default_market_average,
        )

    # ------------------------------------------------------------------
    # Public operations
    # ------------------------------------------------------------------
    def predict_price(self, features: FeaturesInput) -> PricePrediction:
        feats = validate_features(features)
        w = self.weights

        predicted = compute_base_price(feats, w)

        # one lookup feeds both similarity and the market average
        listings = self.market.comparables(location=feats.location, room_type=feats.room_type)
        similar = count_similar(feats, listings, size_tolerance=w.similar_size_tolerance)
        average = market_average(
            feats.location,
            feats.room_type,
            listings,
            default=w.default_market_average,
        )

        prediction = PricePrediction(
            predicted_price=predicted,
            confidence=confidence_from_similar(similar, w),
            price_range=price_range(predicted, w),
            market_comparison=compare_to_market(predicted, average, fair_band=w.fair_band),
            insights=generate_insights(feats, predicted, average),
            similar_listings=similar,
            market_average=average,
        )

        logger.debug(
            "predict_price_done",
            extra=log_context(
                location=feats.location_key,
                room_type=feats.room_type,
                predicted_price=predicted,
                market_average=average,
                similar_listings=similar,
            ),
        )
        return prediction

    def get_suggested_price(self, features: FeaturesInput) -> SuggestedPriceTiers:
        return suggest_tiers(self.predict_price(features), budget_factor=self.weights.budget_factor)

    def assess_listed_price(self, features: FeaturesInput, asking_price: float) -> PriceAssessment:
        return assess_price(self.predict_price(features), float(asking_price))


def build_market_source(cfg: AppConfig = config) -> MarketDataSource:
    if cfg.MARKET_DATA_SOURCE == "http":
        return make_market_data_client(cfg)
    return ReferenceMarketData()


def build_default_predictor(cfg: AppConfig = config) -> PricePredictor:
    return PricePredictor(
        market=build_market_source(cfg),
        weights=PricingWeights(default_market_average=cfg.DEFAULT_MARKET_AVERAGE),
    )
