"""Tests for DeparturePoller behavior."""

import asyncio
from unittest.mock import AsyncMock

import pytest

from bustimes.adapters.pollers import DeparturePoller
from bustimes.domain.models import DataResult, ModuleConfig


@pytest.fixture
def departure_service() -> AsyncMock:
    """Create a mock departure service."""
    service = AsyncMock()
    service.get_data.return_value = DataResult(identifier="home", data={})
    return service


@pytest.mark.asyncio
async def test_when_started_then_requests_each_module_immediately(
    departure_service: AsyncMock,
) -> None:
    """Given two modules, when starting, then each is requested without waiting an interval."""
    home = ModuleConfig(timing_point_code="T1")
    station = ModuleConfig(stop_area_code="S1")
    poller = DeparturePoller(departure_service, [("home", home), ("station", station)], 60)

    await poller.start()
    await asyncio.sleep(0.01)
    await poller.stop()

    departure_service.get_data.assert_any_await("home", home)
    departure_service.get_data.assert_any_await("station", station)
    assert departure_service.get_data.await_count == 2


@pytest.mark.asyncio
async def test_when_interval_elapses_then_requests_again(departure_service: AsyncMock) -> None:
    """Given a short interval, when running, then the module is requested repeatedly."""
    poller = DeparturePoller(departure_service, [("home", ModuleConfig())], 0.01)

    await poller.start()
    await asyncio.sleep(0.05)
    await poller.stop()

    assert departure_service.get_data.await_count >= 2


@pytest.mark.asyncio
async def test_when_stopped_then_no_longer_running(departure_service: AsyncMock) -> None:
    """Given a running poller, when stopped, then its tasks are finished."""
    poller = DeparturePoller(departure_service, [("home", ModuleConfig())], 60)

    await poller.start()
    assert poller.running is True

    await poller.stop()

    assert poller.running is False


@pytest.mark.asyncio
async def test_when_started_twice_then_keeps_existing_tasks(departure_service: AsyncMock) -> None:
    """Given a running poller, when started again, then no extra tasks are created."""
    poller = DeparturePoller(departure_service, [("home", ModuleConfig())], 60)

    await poller.start()
    tasks = list(poller._tasks)
    await poller.start()

    assert poller._tasks == tasks
    await poller.stop()


@pytest.mark.asyncio
async def test_when_never_started_then_not_running(departure_service: AsyncMock) -> None:
    """Given a new poller, when checking, then it is not running and stop is a no-op."""
    poller = DeparturePoller(departure_service, [("home", ModuleConfig())], 60)

    assert poller.running is False
    await poller.stop()
    departure_service.get_data.assert_not_awaited()
