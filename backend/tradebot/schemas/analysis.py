"""
CONTRACT 3: Analysis Pipeline

Input: AnalysisRequest (price/volume arrays)
Output: MarketAnalysis (TradingSignal + RiskAssessment + price summary)

The request carries already-parsed numeric series.
Fetching them is the caller's job.
"""

from datetime import datetime, timezone
from typing import Optional
from pydantic import BaseModel, Field, field_validator

from tradebot.schemas.risk import RiskAssessment
from tradebot.schemas.signal import TradingSignal


# =============================================================================
# INPUT: AnalysisRequest
# =============================================================================


class AnalysisRequest(BaseModel):
    """
    Price/volume series to evaluate.
    Sent by: API client / poller
    Received by: Analysis Service
    """

    prices: list[float] = Field(
        ...,
        description="Closing prices, oldest first",
    )
    volumes: Optional[list[float]] = Field(
        default=None,
        description="Trade volumes aligned index-for-index with prices",
    )

    @field_validator("prices")
    @classmethod
    def prices_must_be_positive(cls, v):
        if any(p <= 0 for p in v):
            raise ValueError("prices must be positive")
        return v

    @field_validator("volumes")
    @classmethod
    def volumes_must_align(cls, v, info):
        if v is None:
            return v
        if any(vol < 0 for vol in v):
            raise ValueError("volumes must be non-negative")
        prices = info.data.get("prices")
        if prices is not None and len(v) != len(prices):
            raise ValueError("volumes must have the same length as prices")
        return v

    class Config:
        json_schema_extra = {
            "example": {
                "prices": [43120.5, 43188.0, 43090.2, 43250.8],
                "volumes": [1520.3, 1610.0, 1399.8, 2890.1],
            }
        }


# =============================================================================
# OUTPUT: MarketAnalysis
# =============================================================================


class MarketAnalysis(BaseModel):
    """
    Complete evaluation of one price series.
    Returned by: Analysis Service
    Consumed by: presentation layer
    """

    signal: TradingSignal
    risk: RiskAssessment
    current_price: Optional[float] = None
    price_change_percent: float = Field(
        default=0.0,
        description="% change of the last price versus the previous one",
    )
    price_change_from_start_percent: float = Field(
        default=0.0,
        description="% change of the last price versus the first one",
    )
    data_points: int = Field(..., ge=0)
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    class Config:
        frozen = True
