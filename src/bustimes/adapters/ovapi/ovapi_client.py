"""OVapi timing data client.

Fetches per-timing-point (``tpc``) and per-stop-area (``stopareacode``) data
from an OVapi compatible server, e.g. http://v0.ovapi.nl/tpc/30008155/departures
"""

import json
import logging
import time
from typing import TYPE_CHECKING, Any

import aiohttp

from bustimes.domain.exceptions import FetchError
from bustimes.domain.models.module_config import ModuleConfig
from bustimes.domain.ports.timing_data_source import TimingDataSource

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession

DEFAULT_HEADERS = {"accept": "application/json"}


def build_url(config: ModuleConfig, endpoint: str, code: str) -> str:
    """Build the request URL for a code at an endpoint."""
    url = f"{config.api_base}/{endpoint}/{code}"
    if config.show_only_departures:
        url += f"/{config.departures_only_suffix}"
    return url


class OvApiClient(TimingDataSource):
    """Adapter fetching raw stop data from the OVapi REST API."""

    def __init__(
        self,
        session: "ClientSession",
        timeout_seconds: float = 10,
        log_requests: bool = False,
    ) -> None:
        """Initialize with an aiohttp session and a per-request timeout.

        Args:
            session: Shared aiohttp session.
            timeout_seconds: Total timeout per request.
            log_requests: Log every request with its status and duration.
        """
        self._session = session
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self._log_requests = log_requests

    def _log_response(self, url: str, status: int, started: float) -> None:
        if self._log_requests:
            elapsed_ms = (time.monotonic() - started) * 1000
            logger.info(f"GET {url} -> {status} in {elapsed_ms:.0f} ms")

    async def _get_checked(self, url: str) -> str:
        """GET ``url`` and return the body, failing on anything but status 200."""
        started = time.monotonic()
        try:
            async with self._session.get(
                url, headers=DEFAULT_HEADERS, timeout=self._timeout
            ) as response:
                self._log_response(url, response.status, started)
                if response.status != 200:
                    raise FetchError(url, f"Status {response.status}")
                return await response.text()
        except FetchError:
            raise
        except (aiohttp.ClientError, TimeoutError) as e:
            raise FetchError(url, e) from e

    async def fetch_category(
        self, config: ModuleConfig, endpoint: str, code: str | None
    ) -> dict[str, Any]:
        """Fetch the stop data for ``code`` at ``endpoint``.

        Args:
            config: Module configuration providing the API base and suffix.
            endpoint: Endpoint path segment (timing point or stop area).
            code: Timing point or stop area code(s); may be empty.

        Returns:
            The parsed JSON object, or an empty dict when ``code`` is empty.

        Raises:
            FetchError: The request failed, returned a non-200 status, or the
                body is not a JSON object.
        """
        if not code:
            return {}

        url = build_url(config, endpoint, code)
        body = await self._get_checked(url)

        try:
            data = json.loads(body)
        except ValueError as e:
            raise FetchError(url, e) from e

        if not isinstance(data, dict):
            raise FetchError(url, f"Expected a JSON object, got {type(data).__name__}")

        logger.debug(f"Fetched {len(data)} entries from {url}")
        return data
