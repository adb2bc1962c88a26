"""
Risk Assessor

CONTRACT:
    Input:  PriceSeries + TradingSignal
    Output: RiskAssessment

RESPONSIBILITIES:
    - Measure volatility as the std dev of period-over-period returns
    - Classify it into LOW / MEDIUM / HIGH
    - Escalate one tier when signal confidence is low

PURE PYTHON/NUMPY - deterministic and auditable.
Degenerate input yields the HIGH-risk fallback, never an exception.
"""

from tradebot.services.risk.interface import RiskAssessorInterface
from tradebot.services.risk.service import RiskAssessor, get_risk_assessor

__all__ = [
    "RiskAssessorInterface",
    "RiskAssessor",
    "get_risk_assessor",
]
