"""
Data Ingestion Service Interface

Defines the contract for the market data layer.
"""

from abc import abstractmethod
from typing import Optional

from stockpredict.services.base import BaseService
from stockpredict.schemas.market import Quote, StockData


class DataIngestionServiceInterface(BaseService[str, StockData]):
    """
    Data Ingestion Service Contract.

    INPUT: ticker symbol (validated format, e.g. AAPL, BRK.B)

    OUTPUT: StockData
        - current_price, change, change_percent
        - history: up to `history_lookback` daily closes, oldest first

    Raises DataUnavailableError when no source can serve the ticker.
    """

    @property
    def name(self) -> str:
        return "DataIngestionService"

    @abstractmethod
    async def execute(self, input_data: str) -> StockData:
        """Fetch quote and daily closes for a ticker."""
        pass

    @abstractmethod
    async def get_quote(self, ticker: str) -> Optional[Quote]:
        """Get quick quote for a single ticker."""
        pass

    @abstractmethod
    async def get_quotes(self, tickers: list[str]) -> dict[str, Optional[Quote]]:
        """Get quotes for many tickers, batched to respect rate limits."""
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Check connectivity to data sources."""
        pass
