"""
Indicator Engine Service Implementation

Calculates the latest technical indicators from a price series.
Pure Python/NumPy calculations, no I/O and no hidden state.
"""

import logging
from typing import Optional, Sequence
import numpy as np

from tradebot.schemas.signal import BollingerBandsData, IndicatorSnapshot, MACDData
from tradebot.services.indicators.interface import IndicatorServiceInterface
from tradebot.services.indicators.calculations import (
    bollinger_bands,
    ema,
    get_last_valid,
    macd,
    rsi,
    sma,
    to_array,
)

logger = logging.getLogger(__name__)

# Fixed windows. Not configurable so that signals mean the same for every caller.
RSI_PERIOD = 14
MACD_FAST = 12
MACD_SLOW = 26
MACD_SIGNAL = 9
BB_PERIOD = 20
BB_STD_DEV = 2.0
SMA_PERIOD = 20
EMA_PERIOD = 12


class IndicatorService(IndicatorServiceInterface):
    """
    Indicator Engine Service.

    Never raises: returns whatever subset of indicators the series supports.
    """

    @property
    def name(self) -> str:
        return "IndicatorService"

    def compute(self, prices: Sequence[float]) -> IndicatorSnapshot:
        """Calculate the latest value of every indicator."""
        try:
            closes = to_array(prices)
        except (TypeError, ValueError) as e:
            logger.warning(f"{self.name}: cannot convert prices to numbers: {e}")
            return IndicatorSnapshot.empty()

        if not np.all(np.isfinite(closes)):
            logger.warning(f"{self.name}: price series contains non-finite values")
            return IndicatorSnapshot.empty()

        return IndicatorSnapshot(
            rsi=get_last_valid(rsi(closes, RSI_PERIOD)),
            macd=self._latest_macd(closes),
            bollinger=self._latest_bollinger(closes),
            sma20=get_last_valid(sma(closes, SMA_PERIOD)),
            ema12=get_last_valid(ema(closes, EMA_PERIOD)),
        )

    def _latest_macd(self, closes: np.ndarray) -> Optional[MACDData]:
        macd_line, signal_line, histogram = macd(
            closes, MACD_FAST, MACD_SLOW, MACD_SIGNAL
        )
        macd_val = get_last_valid(macd_line)
        signal_val = get_last_valid(signal_line)
        hist_val = get_last_valid(histogram)

        if macd_val is None or signal_val is None or hist_val is None:
            return None

        return MACDData(
            macd_line=macd_val,
            signal_line=signal_val,
            histogram=hist_val,
        )

    def _latest_bollinger(self, closes: np.ndarray) -> Optional[BollingerBandsData]:
        upper, middle, lower = bollinger_bands(closes, BB_PERIOD, BB_STD_DEV)
        upper_val = get_last_valid(upper)
        middle_val = get_last_valid(middle)
        lower_val = get_last_valid(lower)

        if upper_val is None or middle_val is None or lower_val is None:
            return None

        return BollingerBandsData(upper=upper_val, middle=middle_val, lower=lower_val)


# Singleton instance
_service_instance: Optional[IndicatorService] = None


def get_indicator_service() -> IndicatorService:
    """Get or create indicator service instance."""
    global _service_instance
    if _service_instance is None:
        _service_instance = IndicatorService()
    return _service_instance
