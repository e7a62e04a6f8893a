"""
Alpha Vantage Data Adapter

GLOBAL_QUOTE for the current price and TIME_SERIES_DAILY for closes.
The free tier throttles hard; throttling responses raise RateLimitError.
"""

import logging
from datetime import date
from typing import Any, Optional

import aiohttp

from stockpredict.schemas.market import PricePoint, Quote, StockData
from stockpredict.services.base import RateLimitError

logger = logging.getLogger(__name__)

SOURCE_NAME = "Alpha Vantage"

# Keys Alpha Vantage uses for throttling / quota messages
_THROTTLE_KEYS = ("Note", "Information")


def parse_global_quote(ticker: str, payload: dict[str, Any]) -> Optional[Quote]:
    """Parse a GLOBAL_QUOTE response. None when the quote is empty."""
    quote = payload.get("Global Quote") or {}
    price = quote.get("05. price")
    if not price:
        return None

    return Quote(
        ticker=ticker.upper(),
        current_price=float(price),
        change=float(quote.get("09. change", 0) or 0),
        change_percent=float(str(quote.get("10. change percent", "0")).rstrip("%") or 0),
        source=SOURCE_NAME,
    )


def parse_daily_series(payload: dict[str, Any], lookback: int = 30) -> list[PricePoint]:
    """Parse TIME_SERIES_DAILY into the newest `lookback` closes, oldest first."""
    series = payload.get("Time Series (Daily)") or {}

    # Newest first, as Alpha Vantage orders it
    newest = sorted(series.items(), key=lambda item: item[0], reverse=True)[:lookback]

    return [
        PricePoint(date=date.fromisoformat(day), price=float(values["4. close"]))
        for day, values in reversed(newest)
    ]


class AlphaVantageClient:
    """Thin async client over the Alpha Vantage query endpoint."""

    def __init__(self, api_key: str, base_url: str, timeout: float = 10.0):
        self._api_key = api_key
        self._base_url = base_url
        self._timeout = timeout
        self._session: Optional[aiohttp.ClientSession] = None

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure we have an active HTTP session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self._timeout),
            )
        return self._session

    async def close(self) -> None:
        """Close the HTTP session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def _query(self, function: str, ticker: str) -> dict[str, Any]:
        session = await self._ensure_session()
        params = {"function": function, "symbol": ticker, "apikey": self._api_key}

        async with session.get(self._base_url, params=params) as response:
            response.raise_for_status()
            payload = await response.json(content_type=None)

        for key in _THROTTLE_KEYS:
            if key in payload:
                raise RateLimitError("AlphaVantage", payload[key])
        return payload

    async def get_quote(self, ticker: str) -> Optional[Quote]:
        """
        Current quote for a ticker.

        Returns None when the ticker is unknown or the request fails.

        Raises:
            RateLimitError: If Alpha Vantage throttled the request
        """
        try:
            payload = await self._query("GLOBAL_QUOTE", ticker)
            return parse_global_quote(ticker, payload)
        except RateLimitError:
            raise
        except Exception as e:
            logger.warning(f"Alpha Vantage quote failed for {ticker}: {e}")
            return None

    async def get_stock_data(self, ticker: str, lookback: int = 30) -> Optional[StockData]:
        """
        Quote plus the last `lookback` daily closes.

        Raises:
            RateLimitError: If Alpha Vantage throttled the request
        """
        quote = await self.get_quote(ticker)
        if quote is None:
            return None

        try:
            payload = await self._query("TIME_SERIES_DAILY", ticker)
        except RateLimitError:
            raise
        except Exception as e:
            logger.warning(f"Alpha Vantage daily series failed for {ticker}: {e}")
            return None

        history = parse_daily_series(payload, lookback)
        if not history:
            logger.warning(f"No daily series returned for {ticker}")
            return None

        return StockData(**quote.model_dump(), history=history)
