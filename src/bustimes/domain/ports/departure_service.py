"""Departure service port."""

from typing import Protocol

from bustimes.domain.models.module_config import ModuleConfig
from bustimes.domain.models.pipeline_result import PipelineResult


class DepartureService(Protocol):
    """Port for running one departures request and delivering its outcome."""

    async def get_data(self, identifier: str, config: ModuleConfig) -> PipelineResult:
        """Fetch, merge and aggregate departures for a module."""
        ...
