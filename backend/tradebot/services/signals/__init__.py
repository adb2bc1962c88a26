"""
Signal Generator Service

CONTRACT:
    Input:  PriceSeries + optional VolumeSeries
    Output: TradingSignal

RESPONSIBILITIES:
    - Score the latest indicator values with a weighted voting rule
    - Confirm the leading side with volume spikes
    - Map the scores to BUY / SELL / HOLD with a confidence

Deterministic. No I/O.
"""

from tradebot.services.signals.interface import SignalGeneratorInterface
from tradebot.services.signals.scoring import SignalScore, score_snapshot
from tradebot.services.signals.service import (
    MIN_DATA_POINTS,
    SignalGenerator,
    get_signal_generator,
)

__all__ = [
    "SignalGeneratorInterface",
    "SignalScore",
    "score_snapshot",
    "MIN_DATA_POINTS",
    "SignalGenerator",
    "get_signal_generator",
]
