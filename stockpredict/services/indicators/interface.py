"""
Indicator Engine Service Interface

Defines the contract for the indicator calculation layer.
"""

from abc import abstractmethod

from stockpredict.services.base import BaseService
from stockpredict.schemas.market import PriceSeries
from stockpredict.schemas.prediction import IndicatorSnapshot


class IndicatorServiceInterface(BaseService[PriceSeries, IndicatorSnapshot]):
    """
    Indicator Engine Service Contract.

    INPUT: PriceSeries
        - points: chronological daily closes

    OUTPUT: IndicatorSnapshot
        - Moving averages, MACD, RSI, Bollinger Bands, momentum and
          one-day volatility at the latest close
    """

    @property
    def name(self) -> str:
        return "IndicatorService"

    @abstractmethod
    async def execute(self, input_data: PriceSeries) -> IndicatorSnapshot:
        """Calculate the indicator snapshot for a series."""
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Indicator service is always healthy (pure computation)."""
        pass
