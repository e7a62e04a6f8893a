"""
Indicator Engine Service

CONTRACT:
    Input:  PriceSeries (daily closes)
    Output: IndicatorSnapshot

RESPONSIBILITIES:
    - Moving averages (SMA 5/10/20/50, EMA 12/26) and MACD
    - RSI(14)
    - Bollinger Bands(20, 2)
    - 5/7-day momentum and one-day volatility

Uses NumPy for calculations.
All math is deterministic and reproducible.
"""

from stockpredict.services.indicators.interface import IndicatorServiceInterface
from stockpredict.services.indicators.service import (
    IndicatorService,
    compute_indicators,
    get_indicator_service,
)

__all__ = [
    "IndicatorServiceInterface",
    "IndicatorService",
    "compute_indicators",
    "get_indicator_service",
]
