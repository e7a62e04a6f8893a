"""
Signal Rule Table

Each rule maps indicator readings to a bullish or bearish vote.
Branches are checked in order and the first matching one votes; when none
match the rule's default applies (None = abstain).
"""

from dataclasses import dataclass
from typing import Callable, Optional

from stockpredict.schemas.prediction import IndicatorSnapshot, SignalSide

Predicate = Callable[[IndicatorSnapshot, float], bool]

BULLISH = SignalSide.BULLISH
BEARISH = SignalSide.BEARISH


@dataclass(frozen=True)
class Branch:
    """Vote `points` for `side` when `predicate(snapshot, price)` holds."""

    predicate: Predicate
    side: SignalSide
    points: int


@dataclass(frozen=True)
class Fallthrough:
    """Vote cast when no branch matches."""

    side: SignalSide
    points: int


@dataclass(frozen=True)
class SignalRule:
    """One factor of the vote."""

    name: str
    weight: int
    branches: tuple[Branch, ...]
    default: Optional[Fallthrough] = None

    def evaluate(
        self, snapshot: IndicatorSnapshot, price: float
    ) -> Optional[tuple[SignalSide, int]]:
        for branch in self.branches:
            if branch.predicate(snapshot, price):
                return branch.side, branch.points
        if self.default is not None:
            return self.default.side, self.default.points
        return None


def _golden_cross(s: IndicatorSnapshot, price: float) -> bool:
    return s.sma5 > s.sma20 and s.sma10 > s.sma20


def _death_cross(s: IndicatorSnapshot, price: float) -> bool:
    return s.sma5 < s.sma20 and s.sma10 < s.sma20


SIGNAL_RULES: tuple[SignalRule, ...] = (
    SignalRule(
        name="short_trend",
        weight=3,
        branches=(Branch(lambda s, p: p > s.sma5, BULLISH, 3),),
        default=Fallthrough(BEARISH, 3),
    ),
    SignalRule(
        name="medium_trend",
        weight=2,
        branches=(Branch(lambda s, p: s.sma10 > s.sma20, BULLISH, 2),),
        default=Fallthrough(BEARISH, 2),
    ),
    SignalRule(
        name="long_trend",
        weight=1,
        branches=(Branch(lambda s, p: s.sma20 > s.sma50, BULLISH, 1),),
        default=Fallthrough(BEARISH, 1),
    ),
    SignalRule(
        name="rsi",
        weight=2,
        branches=(
            Branch(lambda s, p: s.rsi < 30, BULLISH, 2),  # oversold
            Branch(lambda s, p: s.rsi > 70, BEARISH, 2),  # overbought
            Branch(lambda s, p: s.rsi > 50, BULLISH, 1),
        ),
        default=Fallthrough(BEARISH, 1),
    ),
    SignalRule(
        name="macd",
        weight=2,
        branches=(Branch(lambda s, p: s.macd > 0, BULLISH, 2),),
        default=Fallthrough(BEARISH, 2),
    ),
    SignalRule(
        name="bollinger",
        weight=2,
        branches=(
            Branch(lambda s, p: p > s.upper_band, BEARISH, 2),
            Branch(lambda s, p: p < s.lower_band, BULLISH, 2),
            Branch(lambda s, p: p > s.sma20_bb, BULLISH, 1),
        ),
        default=Fallthrough(BEARISH, 1),
    ),
    SignalRule(
        name="momentum",
        weight=2,
        branches=(
            Branch(lambda s, p: s.momentum5 > 0 and s.momentum7 > 0, BULLISH, 2),
            Branch(lambda s, p: s.momentum5 < 0 and s.momentum7 < 0, BEARISH, 2),
            Branch(lambda s, p: s.momentum5 > 0, BULLISH, 1),
        ),
        default=Fallthrough(BEARISH, 1),
    ),
    SignalRule(
        name="cross",
        weight=3,
        branches=(
            Branch(_golden_cross, BULLISH, 3),
            Branch(_death_cross, BEARISH, 3),
        ),
    ),
)
