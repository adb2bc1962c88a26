"""
Indicator Engine Service

CONTRACT:
    Input:  PriceSeries
    Output: IndicatorSnapshot

RESPONSIBILITIES:
    - Calculate RSI, MACD, Bollinger Bands, SMA and EMA
    - Report each indicator as absent (None) when its window is not filled

Uses NumPy for calculations.
All math is deterministic and reproducible.
"""

from tradebot.services.indicators.interface import IndicatorServiceInterface
from tradebot.services.indicators.service import IndicatorService, get_indicator_service

__all__ = [
    "IndicatorServiceInterface",
    "IndicatorService",
    "get_indicator_service",
]
