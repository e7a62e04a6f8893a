"""
Yahoo Finance Data Adapter

Fetches daily closes and quotes for US tickers from Yahoo Finance.
Share-class tickers use a dash on Yahoo (BRK.B -> BRK-B).
"""

import asyncio
import logging
import math
from typing import Optional

import yfinance as yf

from stockpredict.schemas.market import PricePoint, Quote, StockData

logger = logging.getLogger(__name__)

SOURCE_NAME = "Yahoo Finance"


def get_yahoo_symbol(ticker: str) -> str:
    """Convert a ticker to Yahoo Finance format."""
    return ticker.upper().strip().replace(".", "-")


def _period_for_lookback(lookback: int) -> str:
    # ~21 trading days per month
    if lookback <= 40:
        return "3mo"
    elif lookback <= 120:
        return "6mo"
    elif lookback <= 252:
        return "1y"
    return "5y"


def _history_points(yahoo_symbol: str, period: str, lookback: int) -> list[PricePoint]:
    """Blocking yfinance call; run in a worker thread."""
    hist = yf.Ticker(yahoo_symbol).history(period=period, interval="1d")
    if hist.empty:
        return []

    points = []
    for idx, row in hist.tail(lookback).iterrows():
        close = float(row["Close"])
        if math.isnan(close) or close <= 0:
            continue
        points.append(PricePoint(date=idx.date(), price=close))
    return points


def _live_quote(yahoo_symbol: str) -> Optional[tuple[float, float]]:
    """(current, previous_close) from ticker info, if Yahoo has them."""
    info = yf.Ticker(yahoo_symbol).info
    current = info.get("currentPrice") or info.get("regularMarketPrice")
    previous = info.get("previousClose")
    if current and previous:
        return float(current), float(previous)
    return None


async def fetch_yahoo_data(ticker: str, lookback: int = 30) -> Optional[StockData]:
    """
    Fetch recent daily closes and the current quote.

    Args:
        ticker: Stock symbol (e.g., "AAPL", "BRK.B")
        lookback: Number of daily closes to keep

    Returns:
        StockData, or None on failure
    """
    yahoo_symbol = get_yahoo_symbol(ticker)

    try:
        logger.info(f"Fetching {yahoo_symbol} from Yahoo Finance...")
        points = await asyncio.to_thread(
            _history_points, yahoo_symbol, _period_for_lookback(lookback), lookback
        )

        if not points:
            logger.warning(f"No data returned for {yahoo_symbol}")
            return None

        current_price = points[-1].price
        prev_close = points[-2].price if len(points) > 1 else current_price

        # Try to get live quote for more accurate current price
        try:
            live = await asyncio.to_thread(_live_quote, yahoo_symbol)
            if live:
                current_price, prev_close = live
        except Exception as e:
            logger.debug(f"Could not get live quote: {e}")

        change = current_price - prev_close
        change_pct = (change / prev_close * 100) if prev_close > 0 else 0.0

        return StockData(
            ticker=ticker.upper(),
            current_price=current_price,
            change=round(change, 4),
            change_percent=round(change_pct, 4),
            source=SOURCE_NAME,
            history=points,
        )

    except Exception as e:
        logger.error(f"Error fetching {ticker} from Yahoo Finance: {e}")
        return None


async def fetch_yahoo_quote(ticker: str) -> Optional[Quote]:
    """Get the latest quote from the last two daily closes."""
    yahoo_symbol = get_yahoo_symbol(ticker)

    try:
        points = await asyncio.to_thread(_history_points, yahoo_symbol, "5d", 2)
        if not points:
            return None

        current_price = points[-1].price
        prev_close = points[-2].price if len(points) > 1 else current_price
        change = current_price - prev_close

        return Quote(
            ticker=ticker.upper(),
            current_price=current_price,
            change=round(change, 4),
            change_percent=round(change / prev_close * 100, 4) if prev_close > 0 else 0.0,
            source=SOURCE_NAME,
        )
    except Exception as e:
        logger.error(f"Error getting quote for {ticker} from Yahoo Finance: {e}")
        return None
