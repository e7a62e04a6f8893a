"""
Technical Indicator Calculations

Pure Python/NumPy implementations of the indicators used by the predictor.
All math is deterministic.

Every function reads the trailing window of a close array and returns the
reading at the latest close. Windows wider than the available history shrink
to whatever exists.
"""

import numpy as np


# =============================================================================
# MOVING AVERAGES
# =============================================================================


def sma(closes: np.ndarray, period: int) -> float:
    """Simple Moving Average of the trailing `period` closes."""
    return float(np.mean(closes[-period:]))


def ema(closes: np.ndarray, period: int) -> float:
    """
    Exponential Moving Average over the whole supplied window.

    Seeded with the first close of the window, not with an SMA.
    """
    multiplier = 2 / (period + 1)

    result = float(closes[0])
    for price in closes[1:]:
        result = (price - result) * multiplier + result

    return float(result)


# =============================================================================
# MOMENTUM INDICATORS
# =============================================================================


def rsi(closes: np.ndarray, period: int = 14) -> float:
    """
    Relative Strength Index over the trailing `period + 1` closes.

    Gains and losses are summed and divided by `period` even when fewer
    differences exist (zero-filled, not averaged over count).
    """
    deltas = np.diff(closes[-(period + 1):])

    gains = np.where(deltas > 0, deltas, 0)
    losses = np.where(deltas < 0, -deltas, 0)

    avg_gain = np.sum(gains) / period
    avg_loss = np.sum(losses) / period

    if avg_loss == 0:
        return 100.0

    rs = avg_gain / avg_loss
    return float(100 - (100 / (1 + rs)))


def momentum(closes: np.ndarray, lookback: int) -> float:
    """Price difference against the close `lookback` bars back."""
    index = max(len(closes) - 1 - lookback, 0)
    return float(closes[-1] - closes[index])


# =============================================================================
# VOLATILITY INDICATORS
# =============================================================================


def bollinger_bands(
    closes: np.ndarray, period: int = 20, std_dev: float = 2.0
) -> tuple[float, float, float]:
    """
    Bollinger Bands with population standard deviation.

    Returns: (upper, middle, lower)
    """
    window = closes[-period:]
    middle = float(np.mean(window))
    std = float(np.std(window))

    upper = middle + (std_dev * std)
    lower = middle - (std_dev * std)

    return upper, middle, lower


def recent_volatility(closes: np.ndarray) -> float:
    """Absolute one-day percent move at the latest close, as a fraction."""
    if len(closes) < 2:
        return 0.0
    return float(abs(closes[-1] - closes[-2]) / closes[-2])
