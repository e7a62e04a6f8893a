"""
Signal Scorer

CONTRACT:
    Input:  IndicatorSnapshot + current price
    Output: SignalScores

Fixed-weight vote table; every rule votes for at most one side.
"""

from stockpredict.services.signals.rules import (
    SIGNAL_RULES,
    Branch,
    Fallthrough,
    SignalRule,
)
from stockpredict.services.signals.scorer import score_signals

__all__ = [
    "SIGNAL_RULES",
    "Branch",
    "Fallthrough",
    "SignalRule",
    "score_signals",
]
