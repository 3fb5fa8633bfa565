"""Poller requesting departures for configured modules on an interval."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bustimes.domain.models.module_config import ModuleConfig
    from bustimes.domain.ports import DepartureService

logger = logging.getLogger(__name__)


class DeparturePoller:
    """Requests departures for each module periodically, one task per module."""

    def __init__(
        self,
        departure_service: DepartureService,
        modules: list[tuple[str, ModuleConfig]],
        update_interval_seconds: float,
    ) -> None:
        """Initialize the departure poller.

        Args:
            departure_service: Service running the departures pipeline.
            modules: ``(identifier, config)`` pairs to poll.
            update_interval_seconds: Delay between requests for a module.
        """
        self.departure_service = departure_service
        self.modules = modules
        self.update_interval_seconds = update_interval_seconds
        self._tasks: list[asyncio.Task] = []

    @property
    def running(self) -> bool:
        """Whether any module's polling task is still active."""
        return any(not task.done() for task in self._tasks)

    async def start(self) -> None:
        """Start one polling task per module."""
        if self.running:
            logger.warning("Departure poller already running")
            return

        self._tasks = [
            asyncio.create_task(self._poll_loop(identifier, config))
            for identifier, config in self.modules
        ]
        logger.info(f"Started departure poller for {len(self._tasks)} module(s)")

    async def stop(self) -> None:
        """Stop all polling tasks."""
        for task in self._tasks:
            task.cancel()
        for task in self._tasks:
            try:
                await task
            except asyncio.CancelledError:
                pass
        if self._tasks:
            logger.info("Stopped departure poller")
        self._tasks = []

    async def _poll_loop(self, identifier: str, config: ModuleConfig) -> None:
        """Request departures now and then every update interval."""
        try:
            while True:
                await self.departure_service.get_data(identifier, config)
                await asyncio.sleep(self.update_interval_seconds)
        except asyncio.CancelledError:
            logger.info(f"Departure poller for module '{identifier}' cancelled")
            raise
