"""
Signal Generator Service Implementation

Fuses the latest indicator values into a BUY / SELL / HOLD recommendation.
All rules are deterministic and auditable.
"""

import logging
import math
from typing import Optional, Sequence

from tradebot.schemas.signal import IndicatorSnapshot, SignalDirection, TradingSignal
from tradebot.services.indicators import IndicatorServiceInterface, get_indicator_service
from tradebot.services.signals.interface import SignalGeneratorInterface
from tradebot.services.signals.scoring import SignalScore, score_snapshot

logger = logging.getLogger(__name__)

MIN_DATA_POINTS = 50
MIN_WINNING_SCORE = 2
MAX_CONFIDENCE = 90
NEUTRAL_CONFIDENCE = 50

INSUFFICIENT_DATA_REASON = (
    f"Insufficient data for analysis (minimum {MIN_DATA_POINTS} data points required)"
)
MIXED_SIGNALS_REASON = (
    "Mixed signals or insufficient conviction. Consider waiting for clearer trend."
)
ERROR_REASON = "Error computing signal. Please try again."


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _confidence(side_score: int, total: int) -> int:
    return _round_half_up(min(MAX_CONFIDENCE, side_score / max(total, 1) * 100))


class SignalGenerator(SignalGeneratorInterface):
    """
    Signal Generator.

    Stateless: every call recomputes indicators from scratch.
    """

    def __init__(self, indicator_service: Optional[IndicatorServiceInterface] = None):
        self._indicator_service = indicator_service

    @property
    def indicator_service(self) -> IndicatorServiceInterface:
        """Lazy load indicator service."""
        if self._indicator_service is None:
            self._indicator_service = get_indicator_service()
        return self._indicator_service

    @property
    def name(self) -> str:
        return "SignalGenerator"

    def generate(
        self,
        prices: Sequence[float],
        volumes: Optional[Sequence[float]] = None,
    ) -> TradingSignal:
        """Generate a trading signal; never raises."""
        try:
            if len(prices) < MIN_DATA_POINTS:
                return self._neutral_signal(INSUFFICIENT_DATA_REASON)

            snapshot = self.indicator_service.compute(prices)
            current_price = float(prices[-1])
            score = score_snapshot(snapshot, current_price, volumes)

            return self._decide(score, snapshot)

        except Exception:
            logger.exception(f"{self.name}: error computing trade signal")
            return self._neutral_signal(ERROR_REASON)

    def _decide(self, score: SignalScore, snapshot: IndicatorSnapshot) -> TradingSignal:
        """Map accumulated votes to a direction and confidence."""
        if score.buy > score.sell and score.buy >= MIN_WINNING_SCORE:
            direction = SignalDirection.BUY
            confidence = _confidence(score.buy, score.total)
            reason = f"Strong buy signal: {', '.join(score.buy_reasons)}"
        elif score.sell > score.buy and score.sell >= MIN_WINNING_SCORE:
            direction = SignalDirection.SELL
            confidence = _confidence(score.sell, score.total)
            reason = f"Strong sell signal: {', '.join(score.sell_reasons)}"
        else:
            direction = SignalDirection.HOLD
            confidence = NEUTRAL_CONFIDENCE
            reason = MIXED_SIGNALS_REASON

        logger.debug(
            f"{self.name}: buy={score.buy} sell={score.sell} -> "
            f"{direction.value} ({confidence}%)"
        )

        return TradingSignal(
            direction=direction,
            confidence=confidence,
            reason=reason,
            indicators=snapshot,
            buy_score=score.buy,
            sell_score=score.sell,
        )

    def _neutral_signal(self, reason: str) -> TradingSignal:
        """HOLD with zero confidence and no indicators."""
        return TradingSignal(
            direction=SignalDirection.HOLD,
            confidence=0,
            reason=reason,
            indicators=IndicatorSnapshot.empty(),
        )


# Singleton instance
_service_instance: Optional[SignalGenerator] = None


def get_signal_generator() -> SignalGenerator:
    """Get or create signal generator instance."""
    global _service_instance
    if _service_instance is None:
        _service_instance = SignalGenerator()
    return _service_instance
