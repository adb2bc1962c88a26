"""Tests for the risk assessor."""

import numpy as np
import pytest

from tradebot.schemas.risk import RiskLevel
from tradebot.services.base import ComputationError, InsufficientDataError
from tradebot.services.risk import RiskAssessor, get_risk_assessor
from tradebot.services.risk.service import FALLBACK_RECOMMENDATION, classify_volatility
from tradebot.services.signals import SignalGenerator


def _alternating(low: float, high: float, n: int = 60) -> list[float]:
    return [low if i % 2 == 0 else high for i in range(n)]


class TestRiskLevel:
    """Tier ordering and escalation."""

    def test_total_ordering(self):
        assert RiskLevel.LOW < RiskLevel.MEDIUM < RiskLevel.HIGH
        assert RiskLevel.HIGH >= RiskLevel.MEDIUM
        assert max(RiskLevel) == RiskLevel.HIGH
        assert sorted([RiskLevel.HIGH, RiskLevel.LOW, RiskLevel.MEDIUM]) == [
            RiskLevel.LOW,
            RiskLevel.MEDIUM,
            RiskLevel.HIGH,
        ]

    def test_escalate(self):
        assert RiskLevel.LOW.escalate() == RiskLevel.MEDIUM
        assert RiskLevel.MEDIUM.escalate() == RiskLevel.HIGH
        assert RiskLevel.HIGH.escalate() == RiskLevel.HIGH

    def test_serializes_as_name(self):
        assert RiskLevel.MEDIUM.value == "MEDIUM"


class TestClassification:
    """Volatility thresholds."""

    @pytest.mark.parametrize(
        "volatility, level",
        [
            (0.0, RiskLevel.LOW),
            (1.99, RiskLevel.LOW),
            (2.0, RiskLevel.MEDIUM),
            (4.99, RiskLevel.MEDIUM),
            (5.0, RiskLevel.HIGH),
            (40.0, RiskLevel.HIGH),
        ],
    )
    def test_thresholds(self, volatility, level):
        assert classify_volatility(volatility) == level


class TestAssess:
    """Tests for RiskAssessor.assess."""

    def setup_method(self):
        self.assessor = RiskAssessor()

    def test_constant_series_is_low(self, constant_prices, make_signal):
        risk = self.assessor.assess(constant_prices, make_signal(80))

        assert risk.risk_level == RiskLevel.LOW
        assert risk.volatility == 0.0
        assert risk.recommendation == (
            "Market showing low volatility. Good for conservative strategies."
        )

    def test_moderate_volatility(self, make_signal):
        risk = self.assessor.assess(_alternating(100.0, 103.0), make_signal(75))

        assert risk.risk_level == RiskLevel.MEDIUM
        assert 2.0 <= risk.volatility < 5.0
        assert "position sizing" in risk.recommendation

    def test_high_volatility(self, make_signal):
        risk = self.assessor.assess(_alternating(100.0, 112.0), make_signal(75))

        assert risk.risk_level == RiskLevel.HIGH
        assert risk.volatility >= 5.0
        assert risk.recommendation.startswith("High volatility warning!")

    def test_volatility_is_population_std_of_returns(self, make_signal):
        prices = [100.0, 110.0, 99.0, 104.0, 101.0]
        returns = np.diff(prices) / np.array(prices[:-1])
        expected = round(float(np.std(returns)) * 100, 2)

        risk = self.assessor.assess(prices, make_signal(90))

        assert risk.volatility == expected

    def test_volatility_rounded_to_two_decimals(self, make_signal):
        risk = self.assessor.assess(_alternating(100.0, 103.0), make_signal(90))
        assert risk.volatility == round(risk.volatility, 2)


class TestEscalation:
    """Low confidence escalates exactly one tier."""

    def setup_method(self):
        self.assessor = RiskAssessor()

    @pytest.mark.parametrize(
        "prices, base, escalated",
        [
            ([100.0] * 60, RiskLevel.LOW, RiskLevel.MEDIUM),
            (_alternating(100.0, 103.0), RiskLevel.MEDIUM, RiskLevel.HIGH),
            (_alternating(100.0, 112.0), RiskLevel.HIGH, RiskLevel.HIGH),
        ],
    )
    def test_escalation_law(self, prices, base, escalated, make_signal):
        confident = self.assessor.assess(prices, make_signal(60))
        doubtful = self.assessor.assess(prices, make_signal(59))

        assert confident.risk_level == base
        assert doubtful.risk_level == escalated
        if base < RiskLevel.HIGH:
            assert doubtful.risk_level > confident.risk_level
        assert doubtful.recommendation == (
            confident.recommendation
            + " Low signal confidence suggests increased caution."
        )
        assert doubtful.volatility == confident.volatility

    def test_insufficient_data_signal_escalates(self, constant_prices):
        signal = SignalGenerator().generate(constant_prices[:10])
        risk = self.assessor.assess(constant_prices, signal)
        assert risk.risk_level == RiskLevel.MEDIUM


class TestFallback:
    """Degenerate input yields the cautious fallback."""

    def setup_method(self):
        self.assessor = RiskAssessor()

    @pytest.mark.parametrize(
        "prices",
        [
            [],
            [100.0],
            [100.0, 0.0, 100.0],
            [100.0, -5.0, 100.0],
            [100.0, float("nan"), 100.0],
            ["x", "y"],
        ],
    )
    def test_fallback(self, prices, make_signal):
        risk = self.assessor.assess(prices, make_signal(90))

        assert risk.risk_level == RiskLevel.HIGH
        assert risk.volatility == 0.0
        assert risk.recommendation == FALLBACK_RECOMMENDATION

    def test_fallback_ignores_confidence(self, make_signal):
        risk = self.assessor.assess([], make_signal(0))
        assert risk.recommendation == FALLBACK_RECOMMENDATION

    def test_calculate_volatility_raises_internally(self):
        with pytest.raises(InsufficientDataError):
            self.assessor.calculate_volatility([100.0])
        with pytest.raises(ComputationError):
            self.assessor.calculate_volatility([100.0, 0.0, 50.0])


class TestDeterminism:

    def test_identical_inputs(self, breakout_up_prices, make_signal):
        assessor = get_risk_assessor()
        signal = make_signal(55)
        assert assessor.assess(breakout_up_prices, signal) == assessor.assess(
            breakout_up_prices, signal
        )

    def test_record(self, constant_prices, make_signal):
        record = RiskAssessor().assess(constant_prices, make_signal(80)).to_record()
        assert record == {
            "risk_level": "LOW",
            "volatility": 0.0,
            "recommendation": (
                "Market showing low volatility. Good for conservative strategies."
            ),
        }
