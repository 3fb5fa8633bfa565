"""Departure domain model."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Departure:
    """A display-ready departure derived from a single pass at a timing point."""

    target_departure_time: str | None
    expected_departure_time: str
    transport_type: str | None
    line_public_number: str | None
    line_wheelchair_accessible: int
    timing_point_name: str | None
    timing_point_wheelchair_accessible: int
    timing_point_visual_accessible: int
    operator: str
    last_update_timestamp: str | None
    destination: str

    def to_payload(self) -> dict[str, Any]:
        """Render the departure with the keys the display front end expects."""
        return {
            "TargetDepartureTime": self.target_departure_time,
            "ExpectedDepartureTime": self.expected_departure_time,
            "TransportType": self.transport_type,
            "LinePublicNumber": self.line_public_number,
            "LineWheelChairAccessible": self.line_wheelchair_accessible,
            "TimingPointName": self.timing_point_name,
            "TimingPointWheelChairAccessible": self.timing_point_wheelchair_accessible,
            "TimingPointVisualAccessible": self.timing_point_visual_accessible,
            "Operator": self.operator,
            "LastUpdateTimeStamp": self.last_update_timestamp,
            "Destination": self.destination,
        }
