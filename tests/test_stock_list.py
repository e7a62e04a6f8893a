"""
Tests for ticker validation and stock search.
"""

import pytest

from stockpredict.services.base import MalformedInputError
from stockpredict.services.data_ingestion.stock_list import (
    POPULAR_SYMBOLS,
    get_popular_stocks,
    is_valid_ticker,
    normalize_ticker,
    search_stocks,
)


class TestTickerValidation:
    """Ticker format checks."""

    @pytest.mark.parametrize("ticker", ["AAPL", "F", "GOOGL", "BRK.B", "aapl", " msft ", "RDS.ABC"])
    def test_valid(self, ticker):
        assert is_valid_ticker(ticker)

    @pytest.mark.parametrize(
        "ticker", ["", "TOOLONG", "123", "BRK.", "BRK.ABCD", "A-B", "AA PL", ".B"]
    )
    def test_invalid(self, ticker):
        assert not is_valid_ticker(ticker)

    def test_normalize_trims_and_uppercases(self):
        assert normalize_ticker("  brk.b ") == "BRK.B"

    def test_normalize_rejects_invalid(self):
        with pytest.raises(MalformedInputError) as exc_info:
            normalize_ticker("123")
        assert "Invalid ticker" in exc_info.value.message


class TestSearch:
    """search_stocks and catalogue helpers."""

    def test_empty_query_returns_popular(self):
        results = search_stocks("  ")
        assert [r["symbol"] for r in results] == POPULAR_SYMBOLS

    def test_exact_symbol_first_without_duplicate(self):
        results = search_stocks("aapl")
        symbols = [r["symbol"] for r in results]
        assert symbols[0] == "AAPL"
        assert symbols.count("AAPL") == 1
        assert results[0]["name"] == "Apple Inc"

    def test_uncatalogued_ticker_is_echoed(self):
        results = search_stocks("AAP")
        assert results[0] == {"symbol": "AAP", "name": "AAP", "sector": "Unknown"}
        assert "AAPL" in [r["symbol"] for r in results]

    def test_partial_match_includes_class_shares(self):
        symbols = [r["symbol"] for r in search_stocks("BRK")]
        assert symbols == ["BRK", "BRK.B"]

    def test_invalid_query_only_matches_catalogue(self):
        results = search_stocks("1")
        assert results == []

    def test_limit(self):
        assert len(search_stocks("A", limit=3)) == 3

    def test_popular_count(self):
        assert len(get_popular_stocks()) == 16
        assert len(get_popular_stocks(4)) == 4

