"""Outcome of a single departures request."""

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict

from bustimes.domain.models.departure import Departure


class DataResult(BaseModel):
    """Successful request: departures per display stop name."""

    model_config = ConfigDict(frozen=True)

    notification: ClassVar[str] = "DATA"

    identifier: str
    data: dict[str, list[Departure]]

    def to_payload(self) -> dict[str, Any]:
        return {
            "identifier": self.identifier,
            "data": {
                stop_name: [departure.to_payload() for departure in departures]
                for stop_name, departures in self.data.items()
            },
        }


class ErrorResult(BaseModel):
    """Failed request with a human-readable message."""

    model_config = ConfigDict(frozen=True)

    notification: ClassVar[str] = "ERROR"

    identifier: str
    error: str

    def to_payload(self) -> dict[str, Any]:
        return {"identifier": self.identifier, "error": self.error}


PipelineResult = DataResult | ErrorResult
