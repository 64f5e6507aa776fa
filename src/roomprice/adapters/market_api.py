# src/roomprice/adapters/market_api.py
from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import requests
from pydantic import ValidationError as PydanticValidationError

from roomprice.adapters.config import AppConfig
from roomprice.adapters.logging_utils import get_logger, log_context
from roomprice.domain.errors import MarketDataError
from roomprice.domain.ports import ReferenceListing

logger = get_logger(__name__)

_RETRY_STATUSES = (429, 500, 502, 503, 504)


@dataclass(frozen=True)
class HttpMarketDataSource:
    """
    Market data from an external provider.

    Expects:
      GET {base_url}/listings?location=<area>&room_type=<type>

    answering either a JSON list of records or {"listings": [...]}, each record
    carrying location, size, room type and monthly price. camelCase
    (roomType) and snake_case (room_type) keys are both accepted.
    """

    base_url: str
    api_key: str | None = None
    timeout_s: float = 10.0
    max_retries: int = 2
    backoff_base_s: float = 0.5

    # -------------------------------------------------------------------------
    # Low-level HTTP bits
    # -------------------------------------------------------------------------
    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["X-Api-Key"] = self.api_key
        return headers

    def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        url = self.base_url.rstrip("/") + "/" + path.lstrip("/")
        last_err: Exception | None = None

        for attempt in range(self.max_retries + 1):
            wait = self.backoff_base_s * (2**attempt)
            try:
                resp = requests.get(
                    url,
                    headers=self._headers(),
                    params=params or {},
                    timeout=self.timeout_s,
                )
            except requests.RequestException as e:
                last_err = e
                logger.info(
                    "market_data_network_error",
                    extra=log_context(url=url, attempt=attempt, error=repr(e)),
                )
                if attempt < self.max_retries:
                    time.sleep(wait)
                continue

            if resp.status_code in _RETRY_STATUSES:
                last_err = MarketDataError(f"market data HTTP {resp.status_code}")
                ra = resp.headers.get("Retry-After")
                if ra:
                    try:
                        wait = max(wait, float(ra))
                    except ValueError:
                        pass
                if attempt < self.max_retries:
                    time.sleep(wait)
                continue

            if resp.status_code >= 400:
                logger.error(
                    "market_data_fetch_error",
                    extra=log_context(
                        status_code=resp.status_code,
                        text=resp.text[:500],
                        params=params,
                    ),
                )
                raise MarketDataError(f"market data HTTP {resp.status_code}: {resp.text[:200]}")

            try:
                return resp.json()
            except ValueError as e:
                raise MarketDataError("market data response is not JSON") from e

        raise MarketDataError(f"market data request failed after retries: {last_err!r}")

    # -------------------------------------------------------------------------
    # Normalization
    # -------------------------------------------------------------------------
    def _normalize_records(self, records: List[Dict[str, Any]]) -> list[ReferenceListing]:
        out: list[ReferenceListing] = []
        dropped = 0
        for rec in records:
            if not isinstance(rec, dict):
                dropped += 1
                continue
            try:
                out.append(
                    ReferenceListing(
                        location=str(rec.get("location") or ""),
                        size=rec.get("size"),
                        room_type=rec.get("roomType") or rec.get("room_type") or rec.get("type"),
                        price=rec.get("price"),
                    )
                )
            except PydanticValidationError:
                dropped += 1
        if dropped:
            logger.info("market_data_dropped_records", extra=log_context(dropped=dropped))
        return out

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------
    def comparables(self, *, location: str, room_type: str) -> list[ReferenceListing]:
        params = {"location": location.lower(), "room_type": room_type}
        data = self._get("/listings", params)

        if isinstance(data, dict):
            data = data.get("listings")
        if not isinstance(data, list):
            raise MarketDataError("market data payload has no listing array")

        listings = self._normalize_records(data)
        logger.info(
            "market_data_comparables",
            extra=log_context(**params, rows=len(listings)),
        )
        return listings


def make_market_data_client(cfg: AppConfig) -> HttpMarketDataSource:
    if not cfg.MARKET_DATA_BASE_URL:
        raise MarketDataError(
            "Missing ROOMPRICE_MARKET_DATA_BASE_URL. Set it before using the http market data source."
        )
    return HttpMarketDataSource(
        base_url=cfg.MARKET_DATA_BASE_URL,
        api_key=cfg.MARKET_DATA_API_KEY,
        timeout_s=cfg.MARKET_DATA_TIMEOUT_S,
        max_retries=cfg.MARKET_DATA_MAX_RETRIES,
        backoff_base_s=cfg.MARKET_DATA_BACKOFF_BASE_S,
    )
