"""Shared fixtures for signal engine tests."""

import pytest

from tradebot.schemas.signal import IndicatorSnapshot, SignalDirection, TradingSignal
from tradebot.services.indicators import IndicatorServiceInterface


class StubIndicatorService(IndicatorServiceInterface):
    """Returns a fixed snapshot, or raises if given an exception."""

    def __init__(self, snapshot: IndicatorSnapshot = None, error: Exception = None):
        self._snapshot = snapshot or IndicatorSnapshot.empty()
        self._error = error
        self.calls = 0

    def compute(self, prices):
        self.calls += 1
        if self._error is not None:
            raise self._error
        return self._snapshot


@pytest.fixture
def stub_indicator_service():
    """Factory for indicator services with a fixed snapshot."""
    return StubIndicatorService


@pytest.fixture
def make_signal():
    """Factory for signals with a given confidence."""

    def _make(confidence: int, direction: SignalDirection = SignalDirection.HOLD):
        return TradingSignal(direction=direction, confidence=confidence, reason="test")

    return _make


@pytest.fixture
def rising_prices():
    """60 strictly increasing prices 1..60."""
    return [float(i) for i in range(1, 61)]


@pytest.fixture
def falling_prices():
    """60 strictly decreasing prices 60..1."""
    return [float(i) for i in range(60, 0, -1)]


@pytest.fixture
def constant_prices():
    """60 identical prices."""
    return [100.0] * 60


@pytest.fixture
def breakout_up_prices():
    """Flat market followed by an accelerating rally."""
    return [100.0] * 55 + [102.0, 105.0, 109.0, 114.0, 120.0]


@pytest.fixture
def breakout_down_prices():
    """Flat market followed by an accelerating sell-off."""
    return [100.0] * 55 + [98.0, 95.0, 91.0, 86.0, 80.0]
