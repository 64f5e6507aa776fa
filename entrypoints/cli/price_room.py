# entrypoints/cli/price_room.py
from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any, Dict

import pandas as pd

from roomprice.adapters.logging_utils import get_logger, log_context
from roomprice.domain.errors import MarketDataError, ValidationError
from roomprice.services.batch import predict_frame
from roomprice.services.price_predictor import build_default_predictor

logger = get_logger(__name__)

_AMENITY_FLAGS = (
    "furnished",
    "has_wifi",
    "has_parking",
    "has_kitchen",
    "has_laundry",
    "has_balcony",
    "pets_allowed",
)


def build_payload(args: argparse.Namespace) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "location": args.location,
        "size": args.size,
        "room_type": args.room_type,
        "distance_to_university": args.distance,
        "floor": args.floor,
    }
    for flag in _AMENITY_FLAGS:
        payload[flag] = bool(getattr(args, flag))
    return payload


def price_csv(in_path: Path, out_path: Path) -> None:
    if not in_path.exists():
        raise SystemExit(f"Rooms file not found: {in_path}")

    df = pd.read_csv(in_path)
    out = predict_frame(df, build_default_predictor())

    out_path.parent.mkdir(parents=True, exist_ok=True)
    out.to_csv(out_path, index=False)

    failed = int(out["error"].notna().sum())
    print(f"Wrote {len(out)} priced rooms to {out_path} (failed={failed})")


def main() -> None:
    ap = argparse.ArgumentParser(
        description="Suggest a monthly rent for a room, or for every room in a CSV."
    )
    ap.add_argument("--csv", type=Path, help="CSV of rooms to price in batch.")
    ap.add_argument(
        "--out",
        type=Path,
        default=Path("data/reports/priced_rooms.csv"),
        help="Output CSV for --csv mode.",
    )

    ap.add_argument("--location", help="Area label, e.g. downtown, university.")
    ap.add_argument("--size", type=float, help="Room size in square meters.")
    ap.add_argument("--room-type", choices=["private", "shared", "studio"])
    ap.add_argument("--distance", type=float, help="Km to the university.")
    ap.add_argument("--floor", type=int, default=0)
    for flag in _AMENITY_FLAGS:
        ap.add_argument(f"--{flag.replace('_', '-')}", dest=flag, action="store_true")
    ap.add_argument(
        "--asking-price",
        type=float,
        default=None,
        help="Also assess this asking price against the prediction.",
    )
    args = ap.parse_args()

    if args.csv:
        price_csv(args.csv, args.out)
        return

    required = (args.location, args.size, args.room_type, args.distance)
    if any(v is None for v in required):
        ap.error("--location, --size, --room-type and --distance are required without --csv")

    predictor = build_default_predictor()
    payload = build_payload(args)
    try:
        result: Dict[str, Any] = {
            "prediction": predictor.predict_price(payload).model_dump(by_alias=True),
            "suggestions": predictor.get_suggested_price(payload).model_dump(by_alias=True),
        }
        if args.asking_price is not None:
            result["assessment"] = predictor.assess_listed_price(
                payload, args.asking_price
            ).model_dump(by_alias=True)
    except ValidationError as e:
        raise SystemExit(str(e)) from e
    except MarketDataError as e:
        logger.error("price_room_market_data_error", extra=log_context(error=str(e)))
        raise SystemExit(f"Market data unavailable: {e}") from e

    print(json.dumps(result, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
