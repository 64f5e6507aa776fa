# src/roomprice/api/schemas.py
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from roomprice.domain.features import RoomFeatures


# --------------------------------------------
# Assess (asking price vs prediction)
# --------------------------------------------

class AssessRequest(BaseModel):
    """
    Body for /assess. Accepts the listing form's camelCase keys
    (askingPrice) as well as snake_case.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    features: RoomFeatures
    asking_price: float = Field(..., gt=0)


# --------------------------------------------
# Health
# --------------------------------------------

class HealthResponse(BaseModel):
    status: str = "ok"
    env: str
    market_data_source: str
