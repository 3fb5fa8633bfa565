"""Domain exceptions."""


class BustimesError(Exception):
    """Base exception for failures while producing departures."""


class FetchError(BustimesError):
    """Raised when a timing-data endpoint cannot be fetched or parsed."""

    def __init__(self, url: str, cause: object) -> None:
        super().__init__(f"Error fetching {url}: {cause}")
        self.url = url
        self.cause = cause


class DataShapeError(BustimesError):
    """Raised when API data lacks a field needed to build departures."""
