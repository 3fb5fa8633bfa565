"""Aggregation of merged stop data into departures per display stop."""

import logging
from typing import Any

from bustimes.domain.exceptions import DataShapeError
from bustimes.domain.models.departure import Departure

logger = logging.getLogger(__name__)

ACCESSIBLE = "ACCESSIBLE"
UNKNOWN = "?"


def accessibility_flag(category: str | None) -> int:
    """Collapse an accessibility category to 1 (accessible) or 0."""
    return 1 if category == ACCESSIBLE else 0


def _first_present(values: dict[str, Any], *keys: str, default: str = UNKNOWN) -> str:
    """Return the first non-empty value among ``keys``, else ``default``."""
    for key in keys:
        value = values.get(key)
        if value:
            return str(value)
    return default


def _require(record: dict[str, Any], key: str, timing_point_code: str) -> Any:
    """Return ``record[key]``, treating an absent key and a null value alike."""
    try:
        value = record[key]
    except (KeyError, TypeError) as e:
        raise DataShapeError(
            f"Missing '{key}' in data for timing point {timing_point_code}"
        ) from e
    if value is None:
        raise DataShapeError(f"Missing '{key}' in data for timing point {timing_point_code}")
    return value


def display_stop_name(stop: dict[str, Any], include_town_name: bool) -> str:
    """Name a stop is shown under, optionally prefixed by its town."""
    if include_town_name:
        return f"{stop.get('TimingPointTown')}, {stop.get('TimingPointName')}"
    return str(stop.get("TimingPointName"))


def _build_departure(
    pass_info: dict[str, Any],
    timing_point_code: str,
    destination: str,
    stop_wheelchair: int,
    stop_visual: int,
) -> Departure:
    return Departure(
        target_departure_time=pass_info.get("TargetDepartureTime"),
        expected_departure_time=_require(pass_info, "ExpectedDepartureTime", timing_point_code),
        transport_type=pass_info.get("TransportType"),
        line_public_number=pass_info.get("LinePublicNumber"),
        line_wheelchair_accessible=accessibility_flag(pass_info.get("WheelChairAccessible")),
        timing_point_name=pass_info.get("TimingPointName"),
        timing_point_wheelchair_accessible=stop_wheelchair,
        timing_point_visual_accessible=stop_visual,
        operator=_first_present(pass_info, "OperatorCode", "DataOwnerCode"),
        last_update_timestamp=pass_info.get("LastUpdateTimeStamp"),
        destination=destination,
    )


def aggregate_departures(
    merged: dict[str, Any],
    destination_filter: frozenset[str] | set[str] | list[str],
    include_town_name: bool,
    debug: bool = False,
) -> dict[str, list[Departure]]:
    """Build the departures per display stop name from merged stop data.

    Timing points that share a display name are collected under the same
    key. Passes whose destination code is not in a non-empty
    ``destination_filter`` are dropped, stops left without departures are
    omitted, and each list is ordered by expected departure time.

    Raises:
        DataShapeError: A stop record or pass lacks a required field.
    """
    departures: dict[str, list[Departure]] = {}

    for timing_point_code, record in merged.items():
        stop = _require(record, "Stop", timing_point_code)
        passes = _require(record, "Passes", timing_point_code)
        if not isinstance(stop, dict) or not isinstance(passes, dict):
            raise DataShapeError(f"Malformed stop record for timing point {timing_point_code}")

        stop_name = display_stop_name(stop, include_town_name)
        stop_wheelchair = accessibility_flag(stop.get("TimingPointWheelChairAccessible"))
        stop_visual = accessibility_flag(stop.get("TimingPointVisualAccessible"))

        stop_departures = departures.setdefault(stop_name, [])

        for pass_info in passes.values():
            destination = _first_present(pass_info, "DestinationName50")

            if destination_filter and pass_info.get("DestinationCode") not in destination_filter:
                if debug:
                    logger.info(
                        f"Skipped line {pass_info.get('LinePublicNumber')} with destination "
                        f"{pass_info.get('DestinationCode')} ({destination})"
                    )
                continue

            stop_departures.append(
                _build_departure(
                    pass_info, timing_point_code, destination, stop_wheelchair, stop_visual
                )
            )

        # Everything filtered out: drop the stop instead of showing an empty list
        if not stop_departures:
            del departures[stop_name]

    for stop_departures in departures.values():
        stop_departures.sort(key=lambda d: d.expected_departure_time)

    return departures
