"""
Signal API Endpoints

Endpoints exposing the signal engine to the presentation layer.
Callers post already-fetched price/volume arrays.
"""

import logging

from fastapi import APIRouter

from tradebot.schemas.analysis import AnalysisRequest, MarketAnalysis
from tradebot.schemas.risk import RiskAssessment
from tradebot.schemas.signal import TradingSignal
from tradebot.services.analysis import get_analysis_service
from tradebot.services.risk import get_risk_assessor
from tradebot.services.signals import get_signal_generator

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/analyze", response_model=MarketAnalysis)
async def analyze(request: AnalysisRequest):
    """
    Full evaluation of a price series.

    Returns the trading signal, the risk assessment and a price summary.
    Series shorter than 50 points yield HOLD with confidence 0.
    """
    service = get_analysis_service()
    return service.analyze(request.prices, request.volumes)


@router.post("/signal", response_model=TradingSignal)
async def get_signal(request: AnalysisRequest):
    """Trading signal only."""
    generator = get_signal_generator()
    return generator.generate(request.prices, request.volumes)


@router.post("/risk", response_model=RiskAssessment)
async def get_risk(request: AnalysisRequest):
    """
    Risk assessment only.

    The signal it depends on is generated from the same series.
    """
    signal = get_signal_generator().generate(request.prices, request.volumes)
    return get_risk_assessor().assess(request.prices, signal)
