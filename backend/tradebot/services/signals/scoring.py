"""
Signal Scoring Rules

Weighted voting over the latest indicator values.
Each rule adds to an independent buy or sell score.
Absent indicators contribute nothing.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence
import numpy as np

from tradebot.schemas.signal import IndicatorSnapshot

RSI_OVERSOLD = 30
RSI_OVERBOUGHT = 70
RSI_WEIGHT = 2

VOLUME_LOOKBACK = 20
VOLUME_SPIKE_RATIO = 1.5


@dataclass
class SignalScore:
    """Accumulated votes for each side."""
    buy: int = 0
    sell: int = 0
    buy_reasons: List[str] = field(default_factory=list)
    sell_reasons: List[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return self.buy + self.sell

    def vote_buy(self, reason: str, weight: int = 1) -> None:
        self.buy += weight
        self.buy_reasons.append(reason)

    def vote_sell(self, reason: str, weight: int = 1) -> None:
        self.sell += weight
        self.sell_reasons.append(reason)


def score_rsi(score: SignalScore, rsi: Optional[float]) -> None:
    if rsi is None:
        return
    if rsi < RSI_OVERSOLD:
        score.vote_buy(f"RSI oversold at {rsi:.2f}", RSI_WEIGHT)
    elif rsi > RSI_OVERBOUGHT:
        score.vote_sell(f"RSI overbought at {rsi:.2f}", RSI_WEIGHT)


def score_macd(score: SignalScore, snapshot: IndicatorSnapshot) -> None:
    m = snapshot.macd
    if m is None:
        return
    if m.macd_line > m.signal_line and m.histogram > 0:
        score.vote_buy("MACD bullish crossover")
    elif m.macd_line < m.signal_line and m.histogram < 0:
        score.vote_sell("MACD bearish crossover")


def score_bollinger(
    score: SignalScore, snapshot: IndicatorSnapshot, current_price: float
) -> None:
    bb = snapshot.bollinger
    if bb is None:
        return
    # Zero-width bands satisfy both; the lower band wins
    if current_price <= bb.lower:
        score.vote_buy("Price touching lower Bollinger Band")
    elif current_price >= bb.upper:
        score.vote_sell("Price touching upper Bollinger Band")


def score_trend(
    score: SignalScore, snapshot: IndicatorSnapshot, current_price: float
) -> None:
    sma20, ema12 = snapshot.sma20, snapshot.ema12
    if sma20 is None or ema12 is None:
        return
    if current_price > sma20 and ema12 > sma20:
        score.vote_buy("Price above SMA20 with EMA12 bullish")
    elif current_price < sma20 and ema12 < sma20:
        score.vote_sell("Price below SMA20 with EMA12 bearish")


def score_volume(score: SignalScore, volumes: Optional[Sequence[float]]) -> None:
    """
    Volume confirmation.

    A spike only reinforces the side already leading. A tie stays a tie.
    """
    if volumes is None or len(volumes) < VOLUME_LOOKBACK:
        return

    recent = np.asarray(volumes[-VOLUME_LOOKBACK:], dtype=np.float64)
    avg_volume = float(np.mean(recent))
    current_volume = float(recent[-1])

    if current_volume <= avg_volume * VOLUME_SPIKE_RATIO:
        return

    if score.buy > score.sell:
        score.vote_buy("High volume supporting bullish trend")
    elif score.sell > score.buy:
        score.vote_sell("High volume supporting bearish trend")


def score_snapshot(
    snapshot: IndicatorSnapshot,
    current_price: float,
    volumes: Optional[Sequence[float]] = None,
) -> SignalScore:
    """Apply every rule in order. Volume must run last."""
    score = SignalScore()
    score_rsi(score, snapshot.rsi)
    score_macd(score, snapshot)
    score_bollinger(score, snapshot, current_price)
    score_trend(score, snapshot, current_price)
    score_volume(score, volumes)
    return score
