# src/roomprice/services/batch.py

from __future__ import annotations

from typing import Any

import pandas as pd

from roomprice.adapters.logging_utils import get_logger, log_context
from roomprice.analysis.suggestions import suggest_tiers
from roomprice.domain.errors import ValidationError
from roomprice.services.price_predictor import PricePredictor

logger = get_logger(__name__)

OUTPUT_COLUMNS = [
    "predicted_price",
    "price_min",
    "price_max",
    "confidence",
    "market_comparison",
    "similar_listings",
    "market_average",
    "budget",
    "error",
]


def _row_to_payload(row: dict[str, Any]) -> dict[str, Any]:
    # blank CSV cells arrive as NaN; let model defaults apply instead
    return {k: v for k, v in row.items() if not (isinstance(v, float) and pd.isna(v))}


def predict_frame(df: pd.DataFrame, predictor: PricePredictor) -> pd.DataFrame:
    """
    Price every room in df.

    Columns may use snake_case (room_type) or camelCase (roomType) names.
    Rows that fail validation keep their inputs, get empty outputs and an
    `error` message; the rest of the batch is still priced.
    """
    results: list[dict[str, Any]] = []
    failed = 0

    for row in df.to_dict(orient="records"):
        try:
            prediction = predictor.predict_price(_row_to_payload(row))
        except ValidationError as err:
            failed += 1
            results.append({col: None for col in OUTPUT_COLUMNS} | {"error": str(err)})
            continue

        results.append(
            {
                "predicted_price": prediction.predicted_price,
                "price_min": prediction.price_range.min,
                "price_max": prediction.price_range.max,
                "confidence": prediction.confidence,
                "market_comparison": prediction.market_comparison,
                "similar_listings": prediction.similar_listings,
                "market_average": prediction.market_average,
                "budget": suggest_tiers(
                    prediction, budget_factor=predictor.weights.budget_factor
                ).budget,
                "error": None,
            }
        )

    logger.info(
        "predict_frame_done",
        extra=log_context(rows=len(df), failed=failed),
    )

    out = pd.DataFrame(results, columns=OUTPUT_COLUMNS, index=df.index)
    return pd.concat([df, out], axis=1)
