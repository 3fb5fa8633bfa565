"""Tests for the departure service pipeline."""

from typing import Any

import pytest

from bustimes.application.services import DepartureService
from bustimes.domain.exceptions import FetchError
from bustimes.domain.models import DataResult, ErrorResult, ModuleConfig


class MockDataSource:
    """Mock timing data source returning canned data per endpoint."""

    def __init__(self, responses: dict[str, dict[str, Any] | Exception]) -> None:
        """Initialize with data (or an exception to raise) per endpoint."""
        self.responses = responses
        self.calls: list[tuple[str, str | None]] = []

    async def fetch_category(
        self,
        config: ModuleConfig,  # noqa: ARG002
        endpoint: str,
        code: str | None,
    ) -> dict[str, Any]:
        """Return the configured response for the endpoint."""
        self.calls.append((endpoint, code))
        if not code:
            return {}
        response = self.responses[endpoint]
        if isinstance(response, Exception):
            raise response
        return response


class RecordingNotifier:
    """Notifier recording every notification sent."""

    def __init__(self) -> None:
        """Initialize with no notifications."""
        self.sent: list[tuple[str, dict[str, Any]]] = []

    async def send_notification(self, notification: str, payload: dict[str, Any]) -> None:
        """Record the notification."""
        self.sent.append((notification, payload))


def stop_record(name: str, expected: str, destination_code: str = "D1") -> dict[str, Any]:
    """Build a stop record with a single pass."""
    return {
        "Stop": {
            "TimingPointName": name,
            "TimingPointTown": "Town",
            "TimingPointWheelChairAccessible": "ACCESSIBLE",
            "TimingPointVisualAccessible": "UNKNOWN",
        },
        "Passes": {
            "P1": {
                "DestinationName50": "North",
                "DestinationCode": destination_code,
                "ExpectedDepartureTime": expected,
                "TargetDepartureTime": expected,
                "LinePublicNumber": "5",
                "OperatorCode": "ARR",
                "WheelChairAccessible": "ACCESSIBLE",
            }
        },
    }


@pytest.fixture
def config() -> ModuleConfig:
    """Create a module configuration with both codes set."""
    return ModuleConfig(timing_point_code="T1", stop_area_code="S1")


@pytest.mark.asyncio
async def test_when_both_fetches_succeed_then_sends_data(config: ModuleConfig) -> None:
    """Given both categories succeed, when getting data, then one DATA notification is sent."""
    source = MockDataSource(
        {
            "tpc": {"T1": stop_record("Main St", "2024-01-01T10:05")},
            "stopareacode": {"S1": {"T2": stop_record("Station", "2024-01-01T10:00")}},
        }
    )
    notifier = RecordingNotifier()
    service = DepartureService(source, notifier)

    result = await service.get_data("module_1", config)

    assert isinstance(result, DataResult)
    assert set(result.data) == {"Main St", "Station"}
    assert len(notifier.sent) == 1
    notification, payload = notifier.sent[0]
    assert notification == "DATA"
    assert payload["identifier"] == "module_1"
    assert payload["data"]["Station"][0]["ExpectedDepartureTime"] == "2024-01-01T10:00"
    assert payload["data"]["Main St"][0]["TimingPointVisualAccessible"] == 0
    assert sorted(source.calls) == [("stopareacode", "S1"), ("tpc", "T1")]


@pytest.mark.asyncio
async def test_when_stop_area_overlaps_timing_point_then_stop_area_wins(
    config: ModuleConfig,
) -> None:
    """Given the same timing point from both endpoints, when getting data, then stop area data is used."""
    source = MockDataSource(
        {
            "tpc": {"T1": stop_record("Direct", "2024-01-01T10:00")},
            "stopareacode": {"S1": {"T1": stop_record("FromArea", "2024-01-01T10:00")}},
        }
    )
    service = DepartureService(source, RecordingNotifier())

    result = await service.get_data("module_1", config)

    assert isinstance(result, DataResult)
    assert list(result.data) == ["FromArea"]


@pytest.mark.asyncio
async def test_when_one_fetch_fails_then_sends_error_without_data(config: ModuleConfig) -> None:
    """Given a failing stop area fetch, when getting data, then only an ERROR is sent."""
    source = MockDataSource(
        {
            "tpc": {"T1": stop_record("Main St", "2024-01-01T10:05")},
            "stopareacode": FetchError("http://ovapi.test/stopareacode/S1", "Status 500"),
        }
    )
    notifier = RecordingNotifier()
    service = DepartureService(source, notifier)

    result = await service.get_data("module_1", config)

    assert isinstance(result, ErrorResult)
    assert notifier.sent == [
        (
            "ERROR",
            {
                "identifier": "module_1",
                "error": "Error fetching http://ovapi.test/stopareacode/S1: Status 500",
            },
        )
    ]


@pytest.mark.asyncio
async def test_when_data_malformed_then_sends_error(config: ModuleConfig) -> None:
    """Given a stop record without passes, when getting data, then an ERROR is sent."""
    source = MockDataSource(
        {"tpc": {"T1": {"Stop": {"TimingPointName": "Main St"}}}, "stopareacode": {}}
    )
    notifier = RecordingNotifier()
    service = DepartureService(source, notifier)

    result = await service.get_data("module_1", config)

    assert isinstance(result, ErrorResult)
    assert "Passes" in result.error
    assert [n for n, _ in notifier.sent] == ["ERROR"]


@pytest.mark.asyncio
async def test_when_destinations_configured_then_filters_and_drops_empty_stops() -> None:
    """Given a destination filter, when getting data, then stops without matches are omitted."""
    config = ModuleConfig(timing_point_code="T1,T2", destinations=["D1"])
    source = MockDataSource(
        {
            "tpc": {
                "T1": stop_record("Main St", "2024-01-01T10:00", destination_code="D1"),
                "T2": stop_record("Station", "2024-01-01T10:00", destination_code="D9"),
            }
        }
    )
    service = DepartureService(source, RecordingNotifier())

    result = await service.get_data("module_1", config)

    assert isinstance(result, DataResult)
    assert list(result.data) == ["Main St"]


@pytest.mark.asyncio
async def test_when_no_codes_configured_then_sends_empty_data() -> None:
    """Given no codes, when getting data, then an empty DATA result is delivered."""
    notifier = RecordingNotifier()
    service = DepartureService(MockDataSource({}), notifier)

    result = await service.get_data("module_1", ModuleConfig())

    assert isinstance(result, DataResult)
    assert notifier.sent == [("DATA", {"identifier": "module_1", "data": {}})]


class TestHandleNotification:
    """Tests for inbound notifications from the display front end."""

    @pytest.mark.asyncio
    async def test_when_getdata_then_runs_pipeline_with_camel_case_config(self) -> None:
        """Given a GETDATA payload with camelCase config, when handled, then data is delivered."""
        source = MockDataSource({"tpc": {"T1": stop_record("Main St", "2024-01-01T10:00")}})
        notifier = RecordingNotifier()
        service = DepartureService(source, notifier)

        result = await service.handle_notification(
            "GETDATA",
            {
                "identifier": "module_2",
                "config": {"timingPointCode": "T1", "showTownName": True},
            },
        )

        assert isinstance(result, DataResult)
        assert list(result.data) == ["Town, Main St"]
        assert notifier.sent[0][0] == "DATA"

    @pytest.mark.asyncio
    async def test_when_unknown_notification_then_ignored(self) -> None:
        """Given another notification, when handled, then nothing is fetched or sent."""
        source = MockDataSource({})
        notifier = RecordingNotifier()
        service = DepartureService(source, notifier)

        result = await service.handle_notification("CONFIG", {"identifier": "module_2"})

        assert result is None
        assert source.calls == []
        assert notifier.sent == []

    @pytest.mark.asyncio
    async def test_when_config_invalid_then_sends_error(self) -> None:
        """Given an invalid config, when handled, then an ERROR is delivered for the module."""
        notifier = RecordingNotifier()
        service = DepartureService(MockDataSource({}), notifier)

        result = await service.handle_notification(
            "GETDATA", {"identifier": "module_2", "config": {"showTownName": "maybe"}}
        )

        assert isinstance(result, ErrorResult)
        assert notifier.sent[0][0] == "ERROR"
        assert notifier.sent[0][1]["identifier"] == "module_2"
