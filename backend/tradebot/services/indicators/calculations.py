"""
Technical Indicator Calculations

Pure NumPy implementations of technical indicators.
All math is deterministic.

Every function returns an array the same length as its input,
padded with NaN wherever the window is not yet filled.
"""

import numpy as np
from typing import Optional, Sequence


def to_array(values: Sequence[float]) -> np.ndarray:
    """Convert a price/volume sequence to a float64 array."""
    return np.asarray(values, dtype=np.float64).reshape(-1)


# =============================================================================
# MOVING AVERAGES
# =============================================================================


def sma(data: np.ndarray, period: int) -> np.ndarray:
    """Simple Moving Average."""
    if len(data) < period:
        return np.full(len(data), np.nan)

    result = np.full(len(data), np.nan)
    for i in range(period - 1, len(data)):
        result[i] = np.mean(data[i - period + 1 : i + 1])
    return result


def ema(data: np.ndarray, period: int) -> np.ndarray:
    """
    Exponential Moving Average.

    Seeded with the SMA of the first `period` valid values. Leading NaNs
    are skipped, so the EMA of a partially defined series (the MACD line)
    starts where that series starts.
    """
    data = np.asarray(data, dtype=np.float64)
    result = np.full(len(data), np.nan)

    valid = np.flatnonzero(~np.isnan(data))
    if len(valid) == 0:
        return result

    start = int(valid[0])
    if len(data) - start < period:
        return result

    multiplier = 2 / (period + 1)
    seed = start + period - 1

    # Start with SMA
    result[seed] = np.mean(data[start : seed + 1])

    for i in range(seed + 1, len(data)):
        result[i] = (data[i] - result[i - 1]) * multiplier + result[i - 1]

    return result


# =============================================================================
# MOMENTUM INDICATORS
# =============================================================================


def _rsi_from_averages(avg_gain: float, avg_loss: float) -> float:
    if avg_loss == 0 and avg_gain == 0:
        # Flat window: neither side dominates
        return 50.0
    if avg_loss == 0:
        return 100.0
    if avg_gain == 0:
        return 0.0
    rs = avg_gain / avg_loss
    return 100 - (100 / (1 + rs))


def rsi(closes: np.ndarray, period: int = 14) -> np.ndarray:
    """Relative Strength Index (Wilder smoothing)."""
    if len(closes) < period + 1:
        return np.full(len(closes), np.nan)

    # Calculate price changes
    deltas = np.diff(closes)

    # Separate gains and losses
    gains = np.where(deltas > 0, deltas, 0.0)
    losses = np.where(deltas < 0, -deltas, 0.0)

    # First average
    avg_gain = np.mean(gains[:period])
    avg_loss = np.mean(losses[:period])

    result = np.full(len(closes), np.nan)
    result[period] = _rsi_from_averages(avg_gain, avg_loss)

    # Subsequent RSI values using smoothed averages
    for i in range(period, len(deltas)):
        avg_gain = (avg_gain * (period - 1) + gains[i]) / period
        avg_loss = (avg_loss * (period - 1) + losses[i]) / period
        result[i + 1] = _rsi_from_averages(avg_gain, avg_loss)

    return result


def macd(
    closes: np.ndarray,
    fast_period: int = 12,
    slow_period: int = 26,
    signal_period: int = 9,
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    MACD (Moving Average Convergence Divergence).

    Exponential smoothing for both the oscillator and the signal line.

    Returns: (macd_line, signal_line, histogram)
    """
    fast_ema = ema(closes, fast_period)
    slow_ema = ema(closes, slow_period)

    macd_line = fast_ema - slow_ema

    # Signal line is EMA of MACD line
    signal_line = ema(macd_line, signal_period)

    # Histogram
    histogram = macd_line - signal_line

    return macd_line, signal_line, histogram


# =============================================================================
# VOLATILITY INDICATORS
# =============================================================================


def rolling_std(data: np.ndarray, period: int) -> np.ndarray:
    """Rolling population standard deviation."""
    result = np.full(len(data), np.nan)
    for i in range(period - 1, len(data)):
        result[i] = np.std(data[i - period + 1 : i + 1])
    return result


def bollinger_bands(
    closes: np.ndarray, period: int = 20, std_dev: float = 2.0
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Bollinger Bands.

    Returns: (upper, middle, lower)
    """
    middle = sma(closes, period)
    std = rolling_std(closes, period)

    upper = middle + (std_dev * std)
    lower = middle - (std_dev * std)

    return upper, middle, lower


def period_returns(closes: np.ndarray) -> np.ndarray:
    """Simple returns (p[i] - p[i-1]) / p[i-1] for each consecutive pair."""
    previous = closes[:-1]
    with np.errstate(divide="ignore", invalid="ignore"):
        return np.diff(closes) / previous


# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================


def get_last_valid(arr: np.ndarray) -> Optional[float]:
    """Get last non-NaN value from array."""
    valid = arr[~np.isnan(arr)]
    return float(valid[-1]) if len(valid) > 0 else None
