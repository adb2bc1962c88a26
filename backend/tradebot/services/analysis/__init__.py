"""
Analysis Pipeline

CONTRACT:
    Input:  PriceSeries + optional VolumeSeries
    Output: MarketAnalysis

Pipeline:
    Indicators -> Signal Generator -> Risk Assessor

Synchronous and stateless. Safe to call from any thread.
"""

from tradebot.services.analysis.service import AnalysisService, get_analysis_service

__all__ = [
    "AnalysisService",
    "get_analysis_service",
]
