"""
TradeBot Schema Contracts

This module defines all JSON contracts between system components.
These are the authoritative interfaces - all modules must conform to these schemas.
"""

from tradebot.schemas.signal import (
    SignalDirection,
    MACDData,
    BollingerBandsData,
    IndicatorSnapshot,
    TradingSignal,
)
from tradebot.schemas.risk import (
    RiskLevel,
    RiskAssessment,
)
from tradebot.schemas.analysis import (
    AnalysisRequest,
    MarketAnalysis,
)

__all__ = [
    # Signal
    "SignalDirection",
    "MACDData",
    "BollingerBandsData",
    "IndicatorSnapshot",
    "TradingSignal",
    # Risk
    "RiskLevel",
    "RiskAssessment",
    # Analysis
    "AnalysisRequest",
    "MarketAnalysis",
]
