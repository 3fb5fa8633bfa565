"""Module configuration domain model."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class ModuleConfig(BaseModel):
    """Per-module settings sent along with every data request.

    Accepts both snake_case field names and the camelCase keys used by the
    display front end (``apiBase``, ``timingPointCode``, ...).
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    api_base: str = "http://v0.ovapi.nl"
    timing_point_endpoint: str = "tpc"
    stop_area_endpoint: str = "stopareacode"
    timing_point_code: str | None = None
    stop_area_code: str | None = None
    show_only_departures: bool = True
    departures_only_suffix: str = "departures"
    destinations: frozenset[str] = Field(default_factory=frozenset)
    show_town_name: bool = False
    debug: bool = False

    @field_validator("api_base")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Drop a trailing slash so URL segments join with a single separator."""
        return v.rstrip("/")

    @field_validator("timing_point_code", "stop_area_code", mode="before")
    @classmethod
    def coerce_code(cls, v: Any) -> Any:
        """Accept unquoted numeric codes such as ``timing_point_code = 30008155``."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("destinations", mode="before")
    @classmethod
    def coerce_destinations(cls, v: Any) -> Any:
        """Accept a single code and numeric destination codes."""
        if isinstance(v, str | int) and not isinstance(v, bool):
            return frozenset({str(v)})
        if isinstance(v, list | tuple | set | frozenset):
            return frozenset(str(code) if isinstance(code, int) else code for code in v)
        return v
