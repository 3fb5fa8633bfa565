"""Application layer - the departures pipeline."""

from bustimes.application.aggregator import aggregate_departures
from bustimes.application.merger import merge_stop_data
from bustimes.application.services import DepartureService

__all__ = ["DepartureService", "aggregate_departures", "merge_stop_data"]
