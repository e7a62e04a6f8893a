"""
Tests for the indicator calculations.

Tests cover:
- Trailing SMA and first-price-seeded EMA
- RSI with the fixed 14 divisor
- Bollinger Bands with population standard deviation
- Momentum lookback and one-day volatility
"""

import numpy as np
import pytest

from stockpredict.services.indicators.calculations import (
    sma,
    ema,
    rsi,
    momentum,
    bollinger_bands,
    recent_volatility,
)


class TestMovingAverages:
    """SMA and EMA."""

    def test_sma_uses_trailing_window(self):
        closes = np.array([1.0, 2.0, 3.0, 4.0, 5.0, 6.0])
        assert sma(closes, 3) == pytest.approx(5.0)

    def test_sma_shrinks_to_available_history(self):
        closes = np.array([2.0, 4.0])
        assert sma(closes, 5) == pytest.approx(3.0)

    def test_ema_seeded_with_first_price(self):
        # period 3 -> multiplier 0.5: 1 -> 1.5 -> 2.25
        closes = np.array([1.0, 2.0, 3.0])
        assert ema(closes, 3) == pytest.approx(2.25)

    def test_ema_single_price_is_that_price(self):
        assert ema(np.array([42.0]), 12) == 42.0

    def test_ema_flat_series_is_exact(self):
        closes = np.full(30, 100.0)
        assert ema(closes, 12) == 100.0
        assert ema(closes, 26) == 100.0


class TestRSI:
    """Relative Strength Index."""

    def test_all_gains_is_100(self):
        closes = np.arange(1.0, 21.0)
        assert rsi(closes) == 100.0

    def test_flat_is_100(self):
        assert rsi(np.full(20, 50.0)) == 100.0

    def test_all_losses_is_0(self):
        closes = np.arange(20.0, 0.0, -1.0)
        assert rsi(closes) == pytest.approx(0.0)

    def test_balanced_moves_is_50(self):
        closes = np.array([10.0, 11.0] * 10)
        assert rsi(closes) == pytest.approx(50.0)

    def test_only_trailing_15_closes_count(self):
        # An early crash outside the window must not register as a loss
        closes = np.concatenate([[100.0, 10.0], np.arange(11.0, 26.0)])
        assert rsi(closes) == 100.0

    def test_divisor_fixed_at_period_for_short_series(self):
        # gains 2/14, losses 1/14 -> rs 2 -> 66.67
        closes = np.array([10.0, 12.0, 11.0])
        assert rsi(closes) == pytest.approx(100 - 100 / 3)

    def test_bounded(self):
        rng = np.random.default_rng(7)
        for _ in range(50):
            closes = 100 + np.cumsum(rng.normal(0, 2, 30))
            value = rsi(np.abs(closes) + 1)
            assert 0.0 <= value <= 100.0


class TestBollingerBands:
    """Bollinger Bands(20, 2)."""

    def test_flat_window_collapses(self):
        upper, middle, lower = bollinger_bands(np.full(25, 100.0))
        assert upper == middle == lower == 100.0

    def test_population_standard_deviation(self):
        closes = np.arange(1.0, 21.0)
        upper, middle, lower = bollinger_bands(closes)

        std = np.sqrt(np.sum((closes - 10.5) ** 2) / 20)
        assert middle == pytest.approx(10.5)
        assert upper == pytest.approx(10.5 + 2 * std)
        assert lower == pytest.approx(10.5 - 2 * std)

    def test_bands_ordered(self):
        closes = np.array([100, 102, 99, 101, 105, 98, 97, 103, 104, 100] * 2, dtype=float)
        upper, middle, lower = bollinger_bands(closes)
        assert lower <= middle <= upper


class TestMomentumAndVolatility:
    """Momentum deltas and one-day volatility."""

    def test_momentum_lookback(self):
        closes = np.arange(1.0, 11.0)
        assert momentum(closes, 5) == pytest.approx(5.0)
        assert momentum(closes, 7) == pytest.approx(7.0)

    def test_momentum_clamps_to_oldest_close(self):
        closes = np.array([10.0, 12.0, 15.0])
        assert momentum(closes, 7) == pytest.approx(5.0)

    def test_recent_volatility_is_last_move(self):
        closes = np.array([100.0, 50.0, 100.0, 110.0])
        assert recent_volatility(closes) == pytest.approx(0.10)

    def test_recent_volatility_single_point(self):
        assert recent_volatility(np.array([100.0])) == 0.0
