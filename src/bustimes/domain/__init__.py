"""Domain layer - core models, ports and errors."""

from bustimes.domain.exceptions import BustimesError, DataShapeError, FetchError
from bustimes.domain.models import DataResult, Departure, ErrorResult, ModuleConfig
from bustimes.domain.ports import DepartureService, ResultNotifier, TimingDataSource

__all__ = [
    "BustimesError",
    "DataResult",
    "DataShapeError",
    "Departure",
    "DepartureService",
    "ErrorResult",
    "FetchError",
    "ModuleConfig",
    "ResultNotifier",
    "TimingDataSource",
]
