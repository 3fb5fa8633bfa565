"""Ports (interfaces) for the ports-and-adapters architecture."""

from bustimes.domain.ports.departure_service import DepartureService
from bustimes.domain.ports.result_notifier import ResultNotifier
from bustimes.domain.ports.timing_data_source import TimingDataSource

__all__ = [
    "DepartureService",
    "ResultNotifier",
    "TimingDataSource",
]
