"""Pollers for periodic departure requests."""

from bustimes.adapters.pollers.departure_poller import DeparturePoller

__all__ = ["DeparturePoller"]
