"""
Indicator Engine Service Interface

Defines the contract for the indicator calculation layer.
"""

from abc import abstractmethod
from typing import Sequence

from tradebot.services.base import BaseService
from tradebot.schemas.signal import IndicatorSnapshot


class IndicatorServiceInterface(BaseService):
    """
    Indicator Engine Service Contract.

    INPUT: PriceSeries
        - Closing prices, oldest first

    OUTPUT: IndicatorSnapshot
        - Latest RSI(14), MACD(12, 26, 9), Bollinger(20, 2), SMA(20), EMA(12)
        - Any indicator whose window exceeds the series is None
    """

    @property
    def name(self) -> str:
        return "IndicatorService"

    @abstractmethod
    def compute(self, prices: Sequence[float]) -> IndicatorSnapshot:
        """Calculate the latest indicator values for a price series."""
        pass
