"""
Signal Poller

Runs the analysis pipeline once per refresh tick.

The poller fetches nothing itself: the caller injects an async `fetch`
that returns the latest price/volume series. The engine call inside a
tick is synchronous and short-lived.
"""

import asyncio
import inspect
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Awaitable, Callable, List, Optional

from tradebot.core.config import settings
from tradebot.schemas.analysis import MarketAnalysis
from tradebot.services.analysis import AnalysisService, get_analysis_service

logger = logging.getLogger(__name__)


@dataclass
class MarketSeries:
    """Price/volume arrays returned by a fetch."""
    prices: List[float]
    volumes: Optional[List[float]] = None


@dataclass
class PollerState:
    """Latest published result and fetch status."""
    analysis: Optional[MarketAnalysis] = None
    loading: bool = False
    error: Optional[str] = None
    last_updated: Optional[datetime] = None
    prices: List[float] = field(default_factory=list)
    volumes: List[float] = field(default_factory=list)


FetchFn = Callable[[], Awaitable[MarketSeries]]
UpdateFn = Callable[[MarketAnalysis], Any]


class SignalPoller:
    """
    Periodic signal refresh.

    Usage:
        poller = SignalPoller(fetch=my_fetch, on_update=render)
        await poller.start()
        ...
        await poller.refresh()  # manual refresh
        await poller.stop()
    """

    def __init__(
        self,
        fetch: FetchFn,
        on_update: Optional[UpdateFn] = None,
        interval_seconds: Optional[float] = None,
        analysis_service: Optional[AnalysisService] = None,
    ):
        self._fetch = fetch
        self._on_update = on_update
        self._interval = (
            interval_seconds
            if interval_seconds is not None
            else settings.poll_interval_seconds
        )
        self._analysis_service = analysis_service or get_analysis_service()
        self._state = PollerState()
        self._task: Optional[asyncio.Task] = None
        self._running = False
        self._generation = 0

    @property
    def state(self) -> PollerState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def interval_seconds(self) -> float:
        return self._interval

    async def start(self) -> bool:
        """Start polling. The first refresh runs immediately."""
        if self._running:
            logger.warning("Signal poller already running")
            return True

        self._running = True
        self._task = asyncio.create_task(self._poll_loop())
        logger.info(f"Signal poller started (every {self._interval}s)")
        return True

    async def stop(self) -> None:
        """Stop polling and wait for the loop to exit."""
        self._running = False

        if self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None

        logger.info("Signal poller stopped")

    async def refresh(self) -> Optional[MarketAnalysis]:
        """
        Fetch, analyze and publish once.

        Returns the published analysis, or None when the fetch or the
        analysis failed, or a newer refresh started while this one was
        in flight.
        """
        self._generation += 1
        generation = self._generation

        self._state.loading = True
        self._state.error = None

        try:
            series = await self._fetch()
        except asyncio.CancelledError:
            raise
        except Exception as e:
            logger.error(f"Failed to fetch trading data: {e}")
            if generation == self._generation:
                self._state.loading = False
                self._state.error = str(e) or "Failed to fetch trading data"
            return None

        try:
            analysis = self._analysis_service.analyze(series.prices, series.volumes)
        except Exception as e:
            logger.exception("Failed to analyze trading data")
            if generation == self._generation:
                self._state.loading = False
                self._state.error = str(e) or "Failed to analyze trading data"
            return None

        if generation != self._generation:
            logger.debug(
                f"Discarding stale analysis (generation {generation}, "
                f"latest {self._generation})"
            )
            return None

        self._state.analysis = analysis
        self._state.prices = list(series.prices)
        self._state.volumes = list(series.volumes or [])
        self._state.loading = False
        self._state.last_updated = datetime.now(timezone.utc)

        await self._publish(analysis)
        return analysis

    async def _publish(self, analysis: MarketAnalysis) -> None:
        if self._on_update is None:
            return
        try:
            result = self._on_update(analysis)
            if inspect.isawaitable(result):
                await result
        except Exception as e:
            logger.error(f"Signal update callback failed: {e}")

    async def _poll_loop(self) -> None:
        """Refresh, then sleep, until stopped."""
        while self._running:
            try:
                await self.refresh()
                await asyncio.sleep(self._interval)
            except asyncio.CancelledError:
                break
            except Exception as e:
                logger.error(f"Poll loop error: {e}")
                await asyncio.sleep(self._interval)
