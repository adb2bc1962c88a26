"""
CONTRACT 2: Risk Assessor

Input: PriceSeries + TradingSignal
Output: RiskAssessment

Volatility-based risk classification.
Pure Python/NumPy logic - deterministic and auditable.
"""

from enum import Enum
from typing import Any
from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class RiskLevel(str, Enum):
    """Risk tier, ordered LOW < MEDIUM < HIGH."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"

    @property
    def rank(self) -> int:
        return _RISK_RANKS[self.value]

    def escalate(self) -> "RiskLevel":
        """Next tier up; HIGH saturates."""
        if self is RiskLevel.LOW:
            return RiskLevel.MEDIUM
        return RiskLevel.HIGH

    # str comparison would order the tiers alphabetically
    def __lt__(self, other):
        if not isinstance(other, RiskLevel):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):
        if not isinstance(other, RiskLevel):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):
        if not isinstance(other, RiskLevel):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):
        if not isinstance(other, RiskLevel):
            return NotImplemented
        return self.rank >= other.rank


_RISK_RANKS = {"LOW": 0, "MEDIUM": 1, "HIGH": 2}


# =============================================================================
# OUTPUT: RiskAssessment
# =============================================================================


class RiskAssessment(BaseModel):
    """
    Risk classification for the current market conditions.
    Returned by: Risk Assessor
    Independent of the TradingSignal it was derived from.
    """

    risk_level: RiskLevel
    volatility: float = Field(..., ge=0, description="Std dev of period returns, in %")
    recommendation: str

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "risk_level": "MEDIUM",
                "volatility": 1.42,
                "recommendation": (
                    "Market showing low volatility. Good for conservative strategies. "
                    "Low signal confidence suggests increased caution."
                ),
            }
        }

    def to_record(self) -> dict[str, Any]:
        """Flat JSON-ready dict for presentation layers."""
        return self.model_dump(mode="json")
