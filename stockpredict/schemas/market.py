"""
CONTRACT 1: Market Data

Input: ticker symbol
Output: StockData

Quote and daily close history as returned by the data providers.
The PriceSeries model is the only input the prediction engine reads.
"""

from datetime import date, timedelta
from typing import Optional, Sequence

import numpy as np
from pydantic import BaseModel, Field, model_validator


# =============================================================================
# PRICE SERIES
# =============================================================================


class PricePoint(BaseModel):
    """Single daily close."""

    date: date
    price: float = Field(..., gt=0, allow_inf_nan=False, description="Closing price")


class PriceSeries(BaseModel):
    """
    Chronological daily closes, oldest first.

    Dates must be strictly ascending (no duplicates) and every price positive.
    Any length is accepted, including zero.
    """

    points: list[PricePoint] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_chronological(self) -> "PriceSeries":
        for prev, curr in zip(self.points, self.points[1:]):
            if curr.date <= prev.date:
                raise ValueError(
                    f"Dates must be strictly ascending: {prev.date} then {curr.date}"
                )
        return self

    @property
    def closes(self) -> np.ndarray:
        return np.array([p.price for p in self.points], dtype=float)

    def __len__(self) -> int:
        return len(self.points)

    @classmethod
    def from_closes(
        cls, closes: Sequence[float], end: Optional[date] = None
    ) -> "PriceSeries":
        """Build a series of consecutive calendar days ending at `end`."""
        end = end or date.today()
        start = end - timedelta(days=len(closes) - 1)
        return cls(
            points=[
                PricePoint(date=start + timedelta(days=i), price=float(price))
                for i, price in enumerate(closes)
            ]
        )


# =============================================================================
# QUOTES
# =============================================================================


class Quote(BaseModel):
    """Current quote for a ticker."""

    ticker: str
    current_price: float = Field(..., gt=0)
    change: float
    change_percent: float
    source: Optional[str] = None


class StockData(Quote):
    """
    Quote plus recent daily closes.
    Returned by: Data Ingestion Service
    Consumed by: Prediction Service
    """

    history: list[PricePoint] = Field(
        default_factory=list,
        description="Up to 30 most recent daily closes, oldest first",
    )

    class Config:
        json_schema_extra = {
            "example": {
                "ticker": "AAPL",
                "current_price": 189.84,
                "change": 1.27,
                "change_percent": 0.67,
                "source": "Yahoo Finance",
                "history": [{"date": "2024-02-02", "price": 185.85}],
            }
        }


class StockInfo(BaseModel):
    """Catalogue entry used for search/autocomplete."""

    symbol: str
    name: str
    sector: str
