"""
Prediction Service

CONTRACT:
    Input:  PredictionRequest (ticker)
    Output: PredictionResult

RESPONSIBILITIES:
    - Validate ticker and price history at the boundary
    - Resolve direction and confidence from the weighted signal vote
    - Random low-data fallback below 20 closes (injectable randomness)
    - Carry quote fields and history through for charting
"""

from stockpredict.services.prediction.interface import PredictionServiceInterface
from stockpredict.services.prediction.resolver import (
    MIN_HISTORY,
    calibrate_confidence,
    fallback_prediction,
    resolve,
)
from stockpredict.services.prediction.service import (
    PredictionService,
    get_prediction_service,
)
from stockpredict.services.prediction.validation import build_price_series

__all__ = [
    "PredictionServiceInterface",
    "PredictionService",
    "get_prediction_service",
    "MIN_HISTORY",
    "calibrate_confidence",
    "fallback_prediction",
    "resolve",
    "build_price_series",
]
