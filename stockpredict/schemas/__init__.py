"""
StockPredict Schema Contracts

This module defines all JSON contracts between system components.
These are the authoritative interfaces - all modules must conform to these schemas.
"""

from stockpredict.schemas.market import (
    PricePoint,
    PriceSeries,
    Quote,
    StockData,
    StockInfo,
)
from stockpredict.schemas.prediction import (
    Direction,
    SignalSide,
    IndicatorSnapshot,
    SignalVote,
    SignalScores,
    Prediction,
    PredictionRequest,
    PredictionResult,
)
from stockpredict.schemas.history import (
    HistoryEntry,
    HistoryResponse,
    RefreshResult,
)

__all__ = [
    # Market
    "PricePoint",
    "PriceSeries",
    "Quote",
    "StockData",
    "StockInfo",
    # Prediction
    "Direction",
    "SignalSide",
    "IndicatorSnapshot",
    "SignalVote",
    "SignalScores",
    "Prediction",
    "PredictionRequest",
    "PredictionResult",
    # History
    "HistoryEntry",
    "HistoryResponse",
    "RefreshResult",
]
