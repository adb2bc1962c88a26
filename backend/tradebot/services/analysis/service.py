"""
Analysis Service Implementation

Runs the signal generator and risk assessor over one price series
and adds the price summary shown next to them.
"""

import logging
from typing import Optional, Sequence, Tuple
import numpy as np

from tradebot.schemas.analysis import MarketAnalysis
from tradebot.services.base import BaseService
from tradebot.services.indicators.calculations import to_array
from tradebot.services.risk import RiskAssessorInterface, get_risk_assessor
from tradebot.services.signals import SignalGeneratorInterface, get_signal_generator

logger = logging.getLogger(__name__)


def _percent_change(current: float, reference: float) -> float:
    if reference == 0:
        return 0.0
    return (current - reference) / reference * 100


def _price_summary(prices: Sequence[float]) -> Tuple[Optional[float], float, float]:
    """Current price, % change vs previous, % change vs first.

    Unusable series (non-numeric or non-finite) give (None, 0.0, 0.0).
    """
    try:
        closes = to_array(prices)
    except (TypeError, ValueError) as e:
        logger.warning(f"Price summary skipped: {e}")
        return None, 0.0, 0.0

    if len(closes) == 0 or not np.all(np.isfinite(closes)):
        return None, 0.0, 0.0

    current_price = float(closes[-1])
    if len(closes) < 2:
        return current_price, 0.0, 0.0

    return (
        current_price,
        _percent_change(current_price, float(closes[-2])),
        _percent_change(current_price, float(closes[0])),
    )


class AnalysisService(BaseService):
    """
    Analysis pipeline.

    Usage:
        service = get_analysis_service()
        analysis = service.analyze(prices, volumes)
        analysis.signal.direction, analysis.risk.risk_level
    """

    def __init__(
        self,
        signal_generator: Optional[SignalGeneratorInterface] = None,
        risk_assessor: Optional[RiskAssessorInterface] = None,
    ):
        self._signal_generator = signal_generator
        self._risk_assessor = risk_assessor

    @property
    def signal_generator(self) -> SignalGeneratorInterface:
        """Lazy load signal generator."""
        if self._signal_generator is None:
            self._signal_generator = get_signal_generator()
        return self._signal_generator

    @property
    def risk_assessor(self) -> RiskAssessorInterface:
        """Lazy load risk assessor."""
        if self._risk_assessor is None:
            self._risk_assessor = get_risk_assessor()
        return self._risk_assessor

    @property
    def name(self) -> str:
        return "AnalysisService"

    def analyze(
        self,
        prices: Sequence[float],
        volumes: Optional[Sequence[float]] = None,
    ) -> MarketAnalysis:
        """
        Evaluate a price series.

        Pipeline:
            1. Signal Generator -> TradingSignal
            2. Risk Assessor (prices + signal) -> RiskAssessment
            3. Price summary
        """
        signal = self.signal_generator.generate(prices, volumes)
        risk = self.risk_assessor.assess(prices, signal)

        current_price, change, change_from_start = _price_summary(prices)

        logger.info(
            f"{self.name}: {len(prices)} points -> {signal.direction.value} "
            f"({signal.confidence}%), risk {risk.risk_level.value}"
        )

        return MarketAnalysis(
            signal=signal,
            risk=risk,
            current_price=current_price,
            price_change_percent=round(change, 4),
            price_change_from_start_percent=round(change_from_start, 4),
            data_points=len(prices),
        )


# Singleton instance
_service_instance: Optional[AnalysisService] = None


def get_analysis_service() -> AnalysisService:
    """Get or create analysis service instance."""
    global _service_instance
    if _service_instance is None:
        _service_instance = AnalysisService()
    return _service_instance
