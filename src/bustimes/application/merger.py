"""Merging of timing point and stop area results."""

from typing import Any


def merge_stop_data(
    timing_point_data: dict[str, Any], stop_area_data: dict[str, dict[str, Any]]
) -> dict[str, Any]:
    """Merge timing point and stop area data into one mapping per timing point code.

    Stop area results hold a nested mapping of timing point code to stop
    record per area; those entries are lifted to the top level. Direct timing
    point data is applied first and each stop area is overlaid on top, so a
    code present in both ends up with the stop area's record.
    """
    merged: dict[str, Any] = dict(timing_point_data)
    for stop_area in stop_area_data.values():
        merged.update(stop_area)
    return merged
