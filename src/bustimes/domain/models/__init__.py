"""Domain models for bus departures."""

from bustimes.domain.models.departure import Departure
from bustimes.domain.models.module_config import ModuleConfig
from bustimes.domain.models.pipeline_result import DataResult, ErrorResult, PipelineResult

__all__ = [
    "DataResult",
    "Departure",
    "ErrorResult",
    "ModuleConfig",
    "PipelineResult",
]
