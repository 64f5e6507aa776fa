# src/roomprice/services/validation.py

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from roomprice.domain.errors import ValidationError
from roomprice.domain.features import RoomFeatures

# camelCase alias -> field name, so errors always name the Python field
_FIELD_BY_ALIAS = {
    (info.alias or name): name for name, info in RoomFeatures.model_fields.items()
}


def _describe(err: dict[str, Any]) -> dict[str, Any]:
    loc = err.get("loc") or ()
    raw = str(loc[0]) if loc else ""
    field = _FIELD_BY_ALIAS.get(raw, raw)
    return {"field": field, "message": err.get("msg", "invalid value"), "type": err.get("type")}


def validate_features(raw: RoomFeatures | Mapping[str, Any]) -> RoomFeatures:
    """
    Turn caller input into RoomFeatures.

    Rejects (as ValidationError):
      - missing location / size / room_type / distance_to_university
      - size <= 0
      - distance_to_university < 0
      - floor < 0
      - room_type outside private / shared / studio

    An unknown location is NOT an error; it prices with the neutral multiplier.
    """
    if isinstance(raw, RoomFeatures):
        return raw
    if not isinstance(raw, Mapping):
        raise ValidationError(f"Expected room features mapping, got {type(raw).__name__}")

    try:
        return RoomFeatures.model_validate(dict(raw))
    except PydanticValidationError as err:
        errors = [_describe(e) for e in err.errors()]
        summary = "; ".join(f"{e['field']}: {e['message']}" for e in errors)
        raise ValidationError(f"Invalid room features: {summary}", errors) from err
