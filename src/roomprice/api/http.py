# src/roomprice/api/http.py
from __future__ import annotations

from fastapi import Depends, FastAPI, HTTPException

from roomprice.adapters.config import config
from roomprice.adapters.logging_utils import get_logger, log_context
from roomprice.domain.errors import MarketDataError
from roomprice.domain.features import RoomFeatures
from roomprice.domain.prediction import PriceAssessment, PricePrediction, SuggestedPriceTiers
from roomprice.services.price_predictor import PricePredictor, build_default_predictor
from .schemas import AssessRequest, HealthResponse

logger = get_logger(__name__)

app = FastAPI(title="roomprice")

# -------------------------------------------------------------------
# Predictor (single init at startup; overridable in tests)
# -------------------------------------------------------------------
_predictor = build_default_predictor(config)


def get_predictor() -> PricePredictor:
    return _predictor


def _market_unavailable(e: MarketDataError) -> HTTPException:
    logger.error("market_data_unavailable", extra=log_context(error=str(e)))
    return HTTPException(status_code=502, detail=f"market data unavailable: {e}")


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(env=config.ENV, market_data_source=config.MARKET_DATA_SOURCE)


@app.post("/predict", response_model=PricePrediction)
def predict_endpoint(
    features: RoomFeatures,
    predictor: PricePredictor = Depends(get_predictor),
) -> PricePrediction:
    try:
        return predictor.predict_price(features)
    except MarketDataError as e:
        raise _market_unavailable(e) from e


@app.post("/suggest", response_model=SuggestedPriceTiers)
def suggest_endpoint(
    features: RoomFeatures,
    predictor: PricePredictor = Depends(get_predictor),
) -> SuggestedPriceTiers:
    try:
        return predictor.get_suggested_price(features)
    except MarketDataError as e:
        raise _market_unavailable(e) from e


@app.post("/assess", response_model=PriceAssessment)
def assess_endpoint(
    payload: AssessRequest,
    predictor: PricePredictor = Depends(get_predictor),
) -> PriceAssessment:
    """Compare the owner's asking price with the predicted range."""
    try:
        return predictor.assess_listed_price(payload.features, payload.asking_price)
    except MarketDataError as e:
        raise _market_unavailable(e) from e
