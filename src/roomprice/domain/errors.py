# src/roomprice/domain/errors.py
from __future__ import annotations

from typing import Any


class ValidationError(ValueError):
    """Room features were rejected before pricing."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []

    @property
    def fields(self) -> list[str]:
        return [e["field"] for e in self.errors if e.get("field")]


class MarketDataError(RuntimeError):
    """A market-data provider could not be reached or sent an unusable payload."""
