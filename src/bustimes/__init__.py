"""Departure times from the OVapi timing-data API for display front ends."""
