"""
Risk Assessor Service Interface

Defines the contract for the risk classification layer.
"""

from abc import abstractmethod
from typing import Sequence

from tradebot.services.base import BaseService
from tradebot.schemas.signal import TradingSignal
from tradebot.schemas.risk import RiskAssessment


class RiskAssessorInterface(BaseService):
    """
    Risk Assessor Service Contract.

    INPUT: PriceSeries + TradingSignal
        - prices: closing prices, oldest first
        - signal: previously generated signal (only confidence is used)

    OUTPUT: RiskAssessment
        - risk_level: LOW / MEDIUM / HIGH
        - volatility: std dev of period returns, in %
        - recommendation: tier-specific guidance

    CLASSIFICATION RULES (in order):
        1. volatility < 2 -> LOW, < 5 -> MEDIUM, else HIGH
        2. signal confidence < 60 -> escalate one tier

    If volatility cannot be computed, returns HIGH with volatility 0.
    """

    @property
    def name(self) -> str:
        return "RiskAssessor"

    @abstractmethod
    def assess(
        self, prices: Sequence[float], signal: TradingSignal
    ) -> RiskAssessment:
        """Classify market risk for a price series and signal."""
        pass
