"""
Shared fixtures.

Environment is set before any stockpredict import so the cached settings
and the SQLite engine point at a throwaway database.
"""

import os
import tempfile
from datetime import date
from typing import Optional

_TMP_DIR = tempfile.mkdtemp(prefix="stockpredict-tests-")
os.environ.setdefault("SQLITE_PATH", os.path.join(_TMP_DIR, "test.db"))
os.environ.setdefault("QUOTE_BATCH_DELAY_SECONDS", "0")
os.environ.setdefault("ALPHAVANTAGE_API_KEY", "")

import pytest  # noqa: E402

from stockpredict.schemas.market import PriceSeries, Quote, StockData  # noqa: E402
from stockpredict.schemas.prediction import IndicatorSnapshot  # noqa: E402
from stockpredict.services.base import DataUnavailableError  # noqa: E402
from stockpredict.services.data_ingestion.interface import (  # noqa: E402
    DataIngestionServiceInterface,
)


def make_series(closes, end: date = date(2024, 3, 1)) -> PriceSeries:
    return PriceSeries.from_closes(closes, end=end)


def make_snapshot(**overrides) -> IndicatorSnapshot:
    """Neutral snapshot around price 100; override the fields under test."""
    values = dict(
        current_price=100.0,
        sma5=100.0,
        sma10=100.0,
        sma20=100.0,
        sma50=100.0,
        ema12=100.0,
        ema26=100.0,
        macd=0.0,
        rsi=50.0,
        sma20_bb=100.0,
        upper_band=104.0,
        lower_band=96.0,
        momentum5=0.0,
        momentum7=0.0,
        recent_volatility=0.01,
    )
    values.update(overrides)
    return IndicatorSnapshot(**values)


def make_stock_data(ticker: str, closes, change: float = 1.0) -> StockData:
    series = make_series(closes)
    current = closes[-1] if closes else 100.0
    return StockData(
        ticker=ticker,
        current_price=current,
        change=change,
        change_percent=round(change / (current - change) * 100, 4),
        source="Fake",
        history=series.points,
    )


class FakeDataService(DataIngestionServiceInterface):
    """In-memory market data keyed by ticker."""

    def __init__(self, stocks: Optional[dict[str, StockData]] = None, quotes=None):
        self.stocks = stocks or {}
        self.quotes = quotes or {}
        self.requested: list[str] = []

    async def execute(self, input_data: str) -> StockData:
        self.requested.append(input_data)
        if input_data not in self.stocks:
            raise DataUnavailableError(self.name, f"No data for {input_data}")
        return self.stocks[input_data]

    async def get_quote(self, ticker: str) -> Optional[Quote]:
        return self.quotes.get(ticker)

    async def get_quotes(self, tickers: list[str]) -> dict[str, Optional[Quote]]:
        return {t: self.quotes.get(t) for t in tickers}

    async def health_check(self) -> bool:
        return True


RISING = [float(p) for p in range(100, 125)]
FALLING = [float(p) for p in range(200, 175, -1)]
FLAT = [100.0] * 25


@pytest.fixture
def rising_series() -> PriceSeries:
    return make_series(RISING)


@pytest.fixture
def falling_series() -> PriceSeries:
    return make_series(FALLING)


@pytest.fixture
def flat_series() -> PriceSeries:
    return make_series(FLAT)
