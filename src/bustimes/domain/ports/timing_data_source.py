"""Timing data source port."""

from typing import Any, Protocol

from bustimes.domain.models.module_config import ModuleConfig


class TimingDataSource(Protocol):
    """Port for fetching raw timing data for one endpoint category."""

    async def fetch_category(
        self, config: ModuleConfig, endpoint: str, code: str | None
    ) -> dict[str, Any]:
        """Fetch and parse the data for ``code`` at ``endpoint``.

        Returns an empty dict without any request when ``code`` is empty.
        """
        ...
