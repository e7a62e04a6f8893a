"""
Data Ingestion Service Implementation

Fetches quotes and daily closes from Yahoo Finance and Alpha Vantage.
The configured primary source is tried first, the other one on failure.
There is no mock fallback: predictions only run on real data.
"""

import asyncio
import logging
from typing import Awaitable, Callable, NamedTuple, Optional

from stockpredict.core.config import Settings, settings as default_settings
from stockpredict.schemas.market import Quote, StockData
from stockpredict.services.base import DataUnavailableError, RateLimitError
from stockpredict.services.data_ingestion.interface import DataIngestionServiceInterface
from stockpredict.services.data_ingestion.yahoo_adapter import (
    fetch_yahoo_data,
    fetch_yahoo_quote,
)
from stockpredict.services.data_ingestion.alphavantage_adapter import AlphaVantageClient

logger = logging.getLogger(__name__)


class DataSource(NamedTuple):
    """A market data provider as seen by the service."""

    name: str
    fetch_data: Callable[[str, int], Awaitable[Optional[StockData]]]
    fetch_quote: Callable[[str], Awaitable[Optional[Quote]]]


class DataIngestionService(DataIngestionServiceInterface):
    """
    Data Ingestion Service.

    Sources are tried in order; the first one returning data wins.
    """

    def __init__(
        self,
        config: Optional[Settings] = None,
        sources: Optional[list[DataSource]] = None,
    ):
        self._config = config or default_settings
        self._alphavantage: Optional[AlphaVantageClient] = None
        self._sources = sources if sources is not None else self._default_sources()

    def _default_sources(self) -> list[DataSource]:
        yahoo = DataSource("yahoo", fetch_yahoo_data, fetch_yahoo_quote)
        sources = [yahoo]

        if self._config.alphavantage_api_key:
            self._alphavantage = AlphaVantageClient(
                api_key=self._config.alphavantage_api_key,
                base_url=self._config.alphavantage_base_url,
                timeout=self._config.request_timeout_seconds,
            )
            alphavantage = DataSource(
                "alphavantage",
                self._alphavantage.get_stock_data,
                self._alphavantage.get_quote,
            )
            if self._config.primary_data_source == "alphavantage":
                sources.insert(0, alphavantage)
            else:
                sources.append(alphavantage)

        return sources

    @property
    def name(self) -> str:
        return "DataIngestionService"

    @property
    def source_names(self) -> list[str]:
        return [s.name for s in self._sources]

    async def execute(self, input_data: str) -> StockData:
        """
        Fetch quote and daily closes for a ticker.

        Raises:
            DataUnavailableError: If every source failed
            RateLimitError: If every source failed and one was throttled
        """
        ticker = input_data
        lookback = self._config.history_lookback
        throttled = False

        for source in self._sources:
            try:
                data = await source.fetch_data(ticker, lookback)
            except RateLimitError as e:
                logger.warning(f"{source.name} rate limited for {ticker}: {e.message}")
                throttled = True
                continue
            except Exception as e:
                logger.error(f"Error fetching {ticker} from {source.name}: {e}")
                continue

            if data:
                logger.info(
                    f"Got data for {ticker} from {source.name}: "
                    f"${data.current_price:.2f}, {len(data.history)} closes"
                )
                return data
            logger.info(f"{source.name} had no data for {ticker}, trying next source")

        message = (
            f'Stock ticker "{ticker}" not found or data unavailable. '
            "Please verify the symbol and try again."
        )
        if throttled:
            raise RateLimitError(self.name, message, details={"sources": self.source_names})
        raise DataUnavailableError(self.name, message, details={"sources": self.source_names})

    async def get_quote(self, ticker: str) -> Optional[Quote]:
        """Get quick quote for a single ticker. None when no source has one."""
        for source in self._sources:
            try:
                quote = await source.fetch_quote(ticker)
            except Exception as e:
                logger.warning(f"Quote from {source.name} failed for {ticker}: {e}")
                continue
            if quote:
                return quote
        return None

    async def get_quotes(self, tickers: list[str]) -> dict[str, Optional[Quote]]:
        """
        Quotes for many tickers.

        Fetched `quote_batch_size` at a time, with a pause between batches
        to stay under provider rate limits.
        """
        batch_size = max(self._config.quote_batch_size, 1)
        delay = self._config.quote_batch_delay_seconds
        unique = list(dict.fromkeys(tickers))
        results: dict[str, Optional[Quote]] = {}

        for i in range(0, len(unique), batch_size):
            batch = unique[i : i + batch_size]
            quotes = await asyncio.gather(*(self.get_quote(t) for t in batch))
            results.update(zip(batch, quotes))

            if i + batch_size < len(unique) and delay > 0:
                await asyncio.sleep(delay)

        return results

    async def health_check(self) -> bool:
        """Healthy when at least one source can quote a liquid ticker."""
        return await self.get_quote("SPY") is not None

    async def close(self) -> None:
        if self._alphavantage:
            await self._alphavantage.close()


# Singleton instance
_service_instance: Optional[DataIngestionService] = None


def get_data_ingestion_service() -> DataIngestionService:
    """Get or create data ingestion service instance."""
    global _service_instance
    if _service_instance is None:
        _service_instance = DataIngestionService()
    return _service_instance
