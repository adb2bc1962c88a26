"""
Signal Poller

Periodic refresh loop around the analysis pipeline.

Drives the pipeline from a caller-supplied price source:
- Explicit start / stop
- Manual refresh
- Stale results discarded when a newer refresh has started
"""

from tradebot.services.poller.poller import (
    MarketSeries,
    PollerState,
    SignalPoller,
)

__all__ = [
    "MarketSeries",
    "PollerState",
    "SignalPoller",
]
