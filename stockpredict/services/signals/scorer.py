"""
Signal Scorer

Runs the rule table against an indicator snapshot and totals the votes.
"""

from typing import Sequence

from stockpredict.schemas.prediction import (
    IndicatorSnapshot,
    SignalScores,
    SignalSide,
    SignalVote,
)
from stockpredict.services.signals.rules import SIGNAL_RULES, SignalRule


def score_signals(
    snapshot: IndicatorSnapshot,
    current_price: float,
    rules: Sequence[SignalRule] = SIGNAL_RULES,
) -> SignalScores:
    """
    Aggregate rule votes into bullish and bearish weights.

    `total_weight` is the sum of every rule's weight, whether or not the
    rule voted its full weight (or at all).
    """
    bullish = 0
    bearish = 0
    votes = []

    for rule in rules:
        result = rule.evaluate(snapshot, current_price)
        if result is None:
            votes.append(SignalVote(name=rule.name, weight=rule.weight))
            continue

        side, points = result
        if side == SignalSide.BULLISH:
            bullish += points
        else:
            bearish += points
        votes.append(
            SignalVote(name=rule.name, side=side, points=points, weight=rule.weight)
        )

    return SignalScores(
        bullish_weight=bullish,
        bearish_weight=bearish,
        total_weight=sum(rule.weight for rule in rules),
        votes=votes,
    )
