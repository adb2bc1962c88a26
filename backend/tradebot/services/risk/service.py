"""
Risk Assessor Implementation

Classifies market risk from price volatility and signal confidence.
PURE PYTHON/NUMPY - deterministic and auditable.
"""

import logging
from typing import Optional, Sequence
import numpy as np

from tradebot.schemas.risk import RiskAssessment, RiskLevel
from tradebot.schemas.signal import TradingSignal
from tradebot.services.base import ComputationError, InsufficientDataError
from tradebot.services.indicators.calculations import period_returns, to_array
from tradebot.services.risk.interface import RiskAssessorInterface

logger = logging.getLogger(__name__)

LOW_VOLATILITY_LIMIT = 2.0
MEDIUM_VOLATILITY_LIMIT = 5.0
MIN_CONFIDENCE = 60

RECOMMENDATIONS = {
    RiskLevel.LOW: "Market showing low volatility. Good for conservative strategies.",
    RiskLevel.MEDIUM: "Moderate volatility detected. Use appropriate position sizing.",
    RiskLevel.HIGH: (
        "High volatility warning! Consider reducing position size "
        "or waiting for stability."
    ),
}
LOW_CONFIDENCE_CAUTION = " Low signal confidence suggests increased caution."
FALLBACK_RECOMMENDATION = "Unable to assess risk. Exercise maximum caution."


def classify_volatility(volatility: float) -> RiskLevel:
    """Base tier for a volatility percentage."""
    if volatility < LOW_VOLATILITY_LIMIT:
        return RiskLevel.LOW
    elif volatility < MEDIUM_VOLATILITY_LIMIT:
        return RiskLevel.MEDIUM
    return RiskLevel.HIGH


class RiskAssessor(RiskAssessorInterface):
    """
    Risk Assessor.

    Volatility is the population std dev of simple returns, in percent.
    """

    @property
    def name(self) -> str:
        return "RiskAssessor"

    def assess(
        self, prices: Sequence[float], signal: TradingSignal
    ) -> RiskAssessment:
        """Classify risk; never raises."""
        try:
            volatility = self.calculate_volatility(prices)

            risk_level = classify_volatility(volatility)
            recommendation = RECOMMENDATIONS[risk_level]

            # Adjust based on signal confidence
            if signal.confidence < MIN_CONFIDENCE:
                risk_level = risk_level.escalate()
                recommendation += LOW_CONFIDENCE_CAUTION

            return RiskAssessment(
                risk_level=risk_level,
                volatility=round(volatility, 2),
                recommendation=recommendation,
            )

        except (InsufficientDataError, ComputationError) as e:
            logger.warning(f"{self.name}: {e.message}")
            return self._fallback()
        except Exception:
            logger.exception(f"{self.name}: error calculating risk assessment")
            return self._fallback()

    def calculate_volatility(self, prices: Sequence[float]) -> float:
        """
        Std dev of period-over-period returns, as a percentage.

        Raises:
            InsufficientDataError: fewer than 2 prices
            ComputationError: non-positive previous price or non-finite result
        """
        closes = to_array(prices)
        if len(closes) < 2:
            raise InsufficientDataError(
                self.name,
                "At least 2 prices required to compute returns",
                {"data_points": len(closes)},
            )

        if np.any(closes[:-1] <= 0):
            raise ComputationError(self.name, "Non-positive price in return denominator")

        returns = period_returns(closes)
        volatility = float(np.std(returns)) * 100

        if not np.isfinite(volatility):
            raise ComputationError(
                self.name, "Volatility is not finite", {"volatility": volatility}
            )

        return volatility

    def _fallback(self) -> RiskAssessment:
        """Most cautious assessment."""
        return RiskAssessment(
            risk_level=RiskLevel.HIGH,
            volatility=0.0,
            recommendation=FALLBACK_RECOMMENDATION,
        )


# Singleton instance
_service_instance: Optional[RiskAssessor] = None


def get_risk_assessor() -> RiskAssessor:
    """Get or create risk assessor instance."""
    global _service_instance
    if _service_instance is None:
        _service_instance = RiskAssessor()
    return _service_instance
