"""Adapters layer - external system integrations."""

from bustimes.adapters.config import AppConfig
from bustimes.adapters.notifications import PubSubNotifier
from bustimes.adapters.ovapi import OvApiClient
from bustimes.adapters.pollers import DeparturePoller

__all__ = [
    "AppConfig",
    "DeparturePoller",
    "OvApiClient",
    "PubSubNotifier",
]
