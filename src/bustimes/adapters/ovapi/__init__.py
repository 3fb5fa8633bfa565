"""OVapi adapter."""

from bustimes.adapters.ovapi.ovapi_client import OvApiClient

__all__ = ["OvApiClient"]
