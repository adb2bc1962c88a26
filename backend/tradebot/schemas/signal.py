"""
CONTRACT 1: Signal Generator

Input: PriceSeries (+ optional VolumeSeries)
Output: TradingSignal

Indicator values are carried as Optional fields.
None means the indicator window was not filled (absent), which is
a distinct state from a computed value of zero.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class SignalDirection(str, Enum):
    BUY = "BUY"
    SELL = "SELL"
    HOLD = "HOLD"


# =============================================================================
# INDICATOR SNAPSHOT
# =============================================================================


class MACDData(BaseModel):
    """Latest MACD values."""

    macd_line: float
    signal_line: float
    histogram: float

    class Config:
        frozen = True


class BollingerBandsData(BaseModel):
    """Latest Bollinger Bands values."""

    upper: float
    middle: float
    lower: float

    class Config:
        frozen = True


class IndicatorSnapshot(BaseModel):
    """
    Latest value of each indicator at evaluation time.

    Every field is None when the series is too short for its window.
    """

    rsi: Optional[float] = Field(default=None, ge=0, le=100)
    macd: Optional[MACDData] = None
    bollinger: Optional[BollingerBandsData] = None
    sma20: Optional[float] = None
    ema12: Optional[float] = None

    class Config:
        frozen = True

    @classmethod
    def empty(cls) -> "IndicatorSnapshot":
        """Snapshot with every indicator absent."""
        return cls()

    def to_record(self, zero_fill: bool = False) -> dict[str, Any]:
        """
        Flatten to a JSON-ready dict.

        With zero_fill the scalar indicators collapse None -> 0.0 for
        presentation layers that cannot render nulls. This is lossy:
        an absent RSI and a computed RSI of 0 become indistinguishable.
        MACD and Bollinger stay None either way.
        """
        record = self.model_dump(mode="json")
        if zero_fill:
            for key in ("rsi", "sma20", "ema12"):
                if record[key] is None:
                    record[key] = 0.0
        return record


# =============================================================================
# OUTPUT: TradingSignal
# =============================================================================


class TradingSignal(BaseModel):
    """
    Trading recommendation produced by the Signal Generator.
    Created fresh on every evaluation and never mutated.
    Consumed by: Risk Assessor, presentation layer
    """

    direction: SignalDirection
    confidence: int = Field(..., ge=0, le=100)
    reason: str
    indicators: IndicatorSnapshot = Field(default_factory=IndicatorSnapshot.empty)
    buy_score: int = Field(default=0, ge=0)
    sell_score: int = Field(default=0, ge=0)
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "direction": "SELL",
                "confidence": 67,
                "reason": "Strong sell signal: RSI overbought at 78.41, Price touching upper Bollinger Band",
                "indicators": {
                    "rsi": 78.41,
                    "macd": {"macd_line": 412.3, "signal_line": 398.7, "histogram": 13.6},
                    "bollinger": {"upper": 64210.5, "middle": 63120.0, "lower": 62029.5},
                    "sma20": 63120.0,
                    "ema12": 63590.2,
                },
                "buy_score": 1,
                "sell_score": 3,
                "timestamp": "2024-02-04T10:30:00Z",
            }
        }

    def to_record(self, zero_fill: bool = False) -> dict[str, Any]:
        """JSON-ready dict for presentation layers; indicators stay nested."""
        record = self.model_dump(mode="json", exclude={"indicators"})
        record["indicators"] = self.indicators.to_record(zero_fill=zero_fill)
        return record
