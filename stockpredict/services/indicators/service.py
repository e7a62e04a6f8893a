"""
Indicator Engine Service Implementation

Builds an IndicatorSnapshot from a price series.
Pure Python/NumPy calculations.
"""

from typing import Optional

from stockpredict.schemas.market import PriceSeries
from stockpredict.schemas.prediction import IndicatorSnapshot
from stockpredict.services.base import InsufficientHistoryError
from stockpredict.services.indicators.interface import IndicatorServiceInterface
from stockpredict.services.indicators.calculations import (
    sma,
    ema,
    rsi,
    momentum,
    bollinger_bands,
    recent_volatility,
)

# EMA input windows are wider than their periods so short series still
# produce a reading.
EMA_FAST_PERIOD = 12
EMA_FAST_WINDOW = 20
EMA_SLOW_PERIOD = 26
EMA_SLOW_WINDOW = 30

LONG_SMA_PERIOD = 50


def compute_indicators(series: PriceSeries) -> IndicatorSnapshot:
    """
    Calculate every indicator the signal scorer reads.

    Windows longer than the series are computed over what exists; sma50
    falls back to sma20 below 50 closes.

    Raises:
        InsufficientHistoryError: If the series is empty
    """
    closes = series.closes
    if len(closes) == 0:
        raise InsufficientHistoryError(
            "IndicatorService", "Cannot compute indicators for an empty series"
        )

    current = float(closes[-1])

    sma_5 = sma(closes, 5)
    sma_10 = sma(closes, 10)
    sma_20 = sma(closes, 20)
    sma_50 = sma(closes, LONG_SMA_PERIOD) if len(closes) >= LONG_SMA_PERIOD else sma_20

    ema_12 = ema(closes[-EMA_FAST_WINDOW:], EMA_FAST_PERIOD)
    ema_26 = ema(closes[-EMA_SLOW_WINDOW:], EMA_SLOW_PERIOD)

    upper, middle, lower = bollinger_bands(closes, 20, 2.0)

    return IndicatorSnapshot(
        current_price=current,
        sma5=sma_5,
        sma10=sma_10,
        sma20=sma_20,
        sma50=sma_50,
        ema12=ema_12,
        ema26=ema_26,
        macd=ema_12 - ema_26,
        rsi=rsi(closes, 14),
        sma20_bb=middle,
        upper_band=upper,
        lower_band=lower,
        momentum5=momentum(closes, 5),
        momentum7=momentum(closes, 7),
        recent_volatility=recent_volatility(closes),
    )


class IndicatorService(IndicatorServiceInterface):
    """
    Indicator Engine Service.

    All calculations are deterministic and reproducible.
    """

    @property
    def name(self) -> str:
        return "IndicatorService"

    async def execute(self, input_data: PriceSeries) -> IndicatorSnapshot:
        return compute_indicators(input_data)

    async def health_check(self) -> bool:
        """Indicator service is always healthy (pure computation)."""
        return True


# Singleton instance
_service_instance: Optional[IndicatorService] = None


def get_indicator_service() -> IndicatorService:
    """Get or create indicator service instance."""
    global _service_instance
    if _service_instance is None:
        _service_instance = IndicatorService()
    return _service_instance
