"""
Signal Generator Service Interface

Defines the contract for the signal generation layer.
"""

from abc import abstractmethod
from typing import Optional, Sequence

from tradebot.services.base import BaseService
from tradebot.schemas.signal import TradingSignal


class SignalGeneratorInterface(BaseService):
    """
    Signal Generator Service Contract.

    INPUT: PriceSeries (+ optional VolumeSeries)
        - prices: closing prices, oldest first
        - volumes: aligned trade volumes (optional)

    OUTPUT: TradingSignal
        - direction: BUY / SELL / HOLD
        - confidence: 0-100
        - reason: rules that fired for the winning side
        - indicators: snapshot used for the decision

    DECISION RULES:
        1. Fewer than 50 prices -> HOLD, confidence 0
        2. Weighted votes from RSI, MACD, Bollinger, SMA/EMA trend, volume
        3. Winning side needs a strict lead and at least 2 votes
        4. Otherwise HOLD, confidence 50

    Never raises: any internal fault yields HOLD with confidence 0.
    """

    @property
    def name(self) -> str:
        return "SignalGenerator"

    @abstractmethod
    def generate(
        self,
        prices: Sequence[float],
        volumes: Optional[Sequence[float]] = None,
    ) -> TradingSignal:
        """Generate a trading signal from a price series."""
        pass
