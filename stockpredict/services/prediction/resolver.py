"""
Decision & Confidence Resolver

Turns signal scores into a directional call with a bounded confidence.
Series shorter than MIN_HISTORY get a random call at the floor confidence.
"""

import math
import random
from typing import Optional

from stockpredict.schemas.market import PriceSeries
from stockpredict.schemas.prediction import Direction, Prediction, SignalScores
from stockpredict.services.indicators.service import compute_indicators
from stockpredict.services.signals.scorer import score_signals

MIN_HISTORY = 20

MIN_CONFIDENCE = 55
MAX_CONFIDENCE = 88
FALLBACK_CONFIDENCE = MIN_CONFIDENCE

# (threshold, multiplier) - every exceeded threshold applies, compounding
VOLATILITY_DAMPENING = (
    (0.05, 0.85),
    (0.10, 0.75),
)


def calibrate_confidence(scores: SignalScores, volatility: float) -> int:
    """
    Confidence percent from the score spread, dampened by volatility.

    Clamped to [MIN_CONFIDENCE, MAX_CONFIDENCE] first, then rounded half-up.
    """
    strength = abs(scores.bullish_score - scores.bearish_score)
    confidence = 50 + strength * 50

    for threshold, multiplier in VOLATILITY_DAMPENING:
        if volatility > threshold:
            confidence *= multiplier

    confidence = min(max(confidence, MIN_CONFIDENCE), MAX_CONFIDENCE)
    return int(math.floor(confidence + 0.5))


def fallback_prediction(rng: Optional[random.Random] = None) -> Prediction:
    """Coin-flip call used when history is too short to analyse."""
    rng = rng or random.Random()
    direction = Direction.UP if rng.random() > 0.5 else Direction.DOWN
    return Prediction(
        direction=direction, confidence=FALLBACK_CONFIDENCE, is_fallback=True
    )


def resolve(series: PriceSeries, rng: Optional[random.Random] = None) -> Prediction:
    """
    Predict the next-period direction for a price series.

    Args:
        series: Chronological daily closes
        rng: Randomness source for the low-data fallback

    Returns:
        Prediction; never raises for a well-formed series
    """
    if len(series) < MIN_HISTORY:
        return fallback_prediction(rng)

    snapshot = compute_indicators(series)
    scores = score_signals(snapshot, snapshot.current_price)

    # Ties go to DOWN
    if scores.bullish_score > scores.bearish_score:
        direction = Direction.UP
    else:
        direction = Direction.DOWN

    return Prediction(
        direction=direction,
        confidence=calibrate_confidence(scores, snapshot.recent_volatility),
    )
