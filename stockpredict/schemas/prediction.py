"""
CONTRACT 2: Prediction Engine

Input: PriceSeries
Output: Prediction

Indicator snapshot, weighted signal votes and the final directional call.
Pure Python/NumPy - all math is deterministic except the low-data fallback.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field

from stockpredict.schemas.market import PricePoint


# =============================================================================
# ENUMS
# =============================================================================


class Direction(str, Enum):
    UP = "UP"
    DOWN = "DOWN"


class SignalSide(str, Enum):
    BULLISH = "BULLISH"
    BEARISH = "BEARISH"


# =============================================================================
# INDICATORS
# =============================================================================


class IndicatorSnapshot(BaseModel):
    """
    Indicator readings at the most recent close.
    Recomputed on every prediction, never cached or persisted.
    """

    current_price: float
    sma5: float
    sma10: float
    sma20: float
    sma50: float = Field(..., description="Aliases sma20 below 50 closes")
    ema12: float
    ema26: float
    macd: float
    rsi: float = Field(..., ge=0, le=100)
    sma20_bb: float
    upper_band: float
    lower_band: float
    momentum5: float
    momentum7: float
    recent_volatility: float = Field(..., ge=0)


# =============================================================================
# SIGNALS
# =============================================================================


class SignalVote(BaseModel):
    """One rule's contribution. `side` is None when the rule abstains."""

    name: str
    side: Optional[SignalSide] = None
    points: int = Field(default=0, ge=0)
    weight: int = Field(..., gt=0)


class SignalScores(BaseModel):
    """Aggregated votes."""

    bullish_weight: int = Field(..., ge=0)
    bearish_weight: int = Field(..., ge=0)
    total_weight: int = Field(..., gt=0)
    votes: list[SignalVote] = Field(default_factory=list)

    @property
    def bullish_score(self) -> float:
        return self.bullish_weight / self.total_weight

    @property
    def bearish_score(self) -> float:
        return self.bearish_weight / self.total_weight


# =============================================================================
# OUTPUT: Prediction
# =============================================================================


class Prediction(BaseModel):
    """Directional call for the next period."""

    direction: Direction
    confidence: int = Field(..., ge=55, le=88, description="Percent")
    is_fallback: bool = Field(
        default=False,
        description="True when history was too short and the call is random",
    )


class PredictionRequest(BaseModel):
    """
    Request for a prediction.
    Sent by: Frontend
    Received by: Prediction Service
    """

    ticker: str = Field(..., description="e.g. AAPL, BRK.B")
    save: bool = Field(default=True, description="Record the prediction in history")
    user_id: str = Field(default="default", max_length=50)


class PredictionResult(BaseModel):
    """
    Prediction plus the quote fields carried through from data retrieval.
    Returned by: Prediction Service
    Consumed by: History, Frontend charts
    """

    ticker: str
    direction: Direction
    confidence: int = Field(..., ge=55, le=88)
    is_fallback: bool = False
    current_price: float
    change: float
    change_percent: float
    history: list[PricePoint] = Field(default_factory=list)
    predicted_at: datetime

    class Config:
        json_schema_extra = {
            "example": {
                "ticker": "AAPL",
                "direction": "UP",
                "confidence": 72,
                "is_fallback": False,
                "current_price": 189.84,
                "change": 1.27,
                "change_percent": 0.67,
                "history": [],
                "predicted_at": "2024-02-05T16:00:00",
            }
        }
