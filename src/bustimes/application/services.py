"""Application services (use cases) for departure requests."""

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from bustimes.application.aggregator import aggregate_departures
from bustimes.application.merger import merge_stop_data
from bustimes.domain.exceptions import BustimesError
from bustimes.domain.models import (
    DataResult,
    Departure,
    ErrorResult,
    ModuleConfig,
    PipelineResult,
)

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from bustimes.domain.ports import ResultNotifier, TimingDataSource

GET_DATA_NOTIFICATION = "GETDATA"


class DepartureService:
    """Runs the fetch, merge and aggregate pipeline and delivers its outcome."""

    def __init__(self, data_source: "TimingDataSource", notifier: "ResultNotifier") -> None:
        """Initialize with a timing data source and a result notifier."""
        self._data_source = data_source
        self._notifier = notifier

    async def _fetch_departures(self, config: ModuleConfig) -> dict[str, list[Departure]]:
        """Fetch both endpoint categories concurrently and aggregate them.

        Either fetch failing fails the whole request.
        """
        timing_point_data, stop_area_data = await asyncio.gather(
            self._data_source.fetch_category(
                config, config.timing_point_endpoint, config.timing_point_code
            ),
            self._data_source.fetch_category(
                config, config.stop_area_endpoint, config.stop_area_code
            ),
        )
        merged = merge_stop_data(timing_point_data, stop_area_data)
        return aggregate_departures(
            merged, config.destinations, config.show_town_name, config.debug
        )

    async def get_data(self, identifier: str, config: ModuleConfig) -> PipelineResult:
        """Request departures for a module and deliver them to the display.

        Exactly one notification is sent: ``DATA`` with the departures per
        stop, or ``ERROR`` with the failure message.

        Args:
            identifier: Opaque module identifier echoed back in the result.
            config: Module configuration for this request.

        Returns:
            The delivered result.
        """
        result: PipelineResult
        try:
            departures = await self._fetch_departures(config)
            result = DataResult(identifier=identifier, data=departures)
        except BustimesError as e:
            logger.error(f"Failed to get departures for module '{identifier}': {e}")
            result = ErrorResult(identifier=identifier, error=str(e))
        except Exception as e:
            logger.error(
                f"Unexpected error getting departures for module '{identifier}': {e}",
                exc_info=True,
            )
            result = ErrorResult(identifier=identifier, error=str(e) or type(e).__name__)

        await self._notifier.send_notification(result.notification, result.to_payload())
        return result

    async def handle_notification(
        self, notification: str, payload: dict[str, Any]
    ) -> PipelineResult | None:
        """Handle an inbound notification from the display front end.

        Only ``GETDATA`` is understood; its payload carries ``identifier``
        and ``config``. Other notifications are ignored.
        """
        if notification != GET_DATA_NOTIFICATION:
            logger.debug(f"Ignoring notification '{notification}'")
            return None

        identifier = str(payload.get("identifier", ""))
        try:
            config = ModuleConfig.model_validate(payload.get("config") or {})
        except ValidationError as e:
            logger.error(f"Invalid configuration for module '{identifier}': {e}")
            result = ErrorResult(identifier=identifier, error=f"Invalid configuration: {e}")
            await self._notifier.send_notification(result.notification, result.to_payload())
            return result

        return await self.get_data(identifier, config)
