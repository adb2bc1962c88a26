"""
TradeBot Services

Service layer containing the signal engine.
Each service has a defined interface (contract) and implementation.
"""

from tradebot.services.base import BaseService

__all__ = ["BaseService"]
