"""
Tests for the Yahoo Finance adapter.

yfinance is replaced with an in-memory Ticker so no request leaves the test.
"""

import math

import pandas as pd
import pytest

from stockpredict.services.data_ingestion import yahoo_adapter
from stockpredict.services.data_ingestion.yahoo_adapter import (
    SOURCE_NAME,
    fetch_yahoo_data,
    fetch_yahoo_quote,
    get_yahoo_symbol,
)


def daily_frame(closes, start="2024-02-01") -> pd.DataFrame:
    index = pd.date_range(start, periods=len(closes), freq="D")
    return pd.DataFrame({"Close": closes}, index=index)


@pytest.fixture
def fake_yahoo(monkeypatch):
    """Install a fake yf.Ticker; returns the dicts it serves from."""
    state = {"frames": {}, "info": {}, "requested": [], "error": None}

    class FakeTicker:
        def __init__(self, symbol):
            if state["error"]:
                raise state["error"]
            state["requested"].append(symbol)
            self.symbol = symbol

        def history(self, period, interval):
            return state["frames"].get(self.symbol, pd.DataFrame())

        @property
        def info(self):
            return state["info"].get(self.symbol, {})

    monkeypatch.setattr(yahoo_adapter.yf, "Ticker", FakeTicker)
    return state


class TestYahooSymbol:
    def test_class_shares_use_dash(self):
        assert get_yahoo_symbol("BRK.B") == "BRK-B"
        assert get_yahoo_symbol("aapl") == "AAPL"


class TestFetchYahooData:
    """fetch_yahoo_data over a fake Ticker."""

    @pytest.mark.asyncio
    async def test_without_live_quote_uses_last_two_closes(self, fake_yahoo):
        fake_yahoo["frames"]["BRK-B"] = daily_frame([400.0, 404.0, 410.0])

        data = await fetch_yahoo_data("BRK.B")

        assert "BRK-B" in fake_yahoo["requested"]
        assert data.ticker == "BRK.B"
        assert data.source == SOURCE_NAME
        assert data.current_price == 410.0
        assert data.change == pytest.approx(6.0)
        assert data.change_percent == pytest.approx(round(6 / 404 * 100, 4))
        assert [p.price for p in data.history] == [400.0, 404.0, 410.0]

    @pytest.mark.asyncio
    async def test_live_quote_overrides_closes(self, fake_yahoo):
        fake_yahoo["frames"]["AAPL"] = daily_frame([98.0, 99.0, 100.0])
        fake_yahoo["info"]["AAPL"] = {"currentPrice": 110.0, "previousClose": 100.0}

        data = await fetch_yahoo_data("AAPL")

        assert data.current_price == 110.0
        assert data.change == pytest.approx(10.0)
        assert data.change_percent == pytest.approx(10.0)
        assert data.history[-1].price == 100.0

    @pytest.mark.asyncio
    async def test_empty_frame_is_none(self, fake_yahoo):
        assert await fetch_yahoo_data("ZZZZ") is None

    @pytest.mark.asyncio
    async def test_keeps_newest_lookback_and_drops_bad_closes(self, fake_yahoo):
        closes = [float(p) for p in range(1, 41)]
        closes[-3] = math.nan
        fake_yahoo["frames"]["MSFT"] = daily_frame(closes)

        data = await fetch_yahoo_data("MSFT", lookback=30)

        prices = [p.price for p in data.history]
        assert len(prices) == 29
        assert prices[0] == 11.0
        assert 38.0 not in prices
        dates = [p.date for p in data.history]
        assert dates == sorted(dates)

    @pytest.mark.asyncio
    async def test_provider_error_is_none(self, fake_yahoo):
        fake_yahoo["error"] = RuntimeError("Yahoo down")
        assert await fetch_yahoo_data("AAPL") is None


class TestFetchYahooQuote:
    @pytest.mark.asyncio
    async def test_quote_from_last_two_closes(self, fake_yahoo):
        fake_yahoo["frames"]["TSLA"] = daily_frame([200.0, 190.0])

        quote = await fetch_yahoo_quote("tsla")

        assert quote.ticker == "TSLA"
        assert quote.current_price == 190.0
        assert quote.change == pytest.approx(-10.0)
        assert quote.change_percent == pytest.approx(-5.0)

    @pytest.mark.asyncio
    async def test_missing_quote_is_none(self, fake_yahoo):
        assert await fetch_yahoo_quote("ZZZZ") is None
