"""Result notifier port."""

from typing import Any, Protocol


class ResultNotifier(Protocol):
    """Port for delivering notifications to the display front end."""

    async def send_notification(self, notification: str, payload: dict[str, Any]) -> None:
        """Deliver a notification (``DATA`` or ``ERROR``) with its payload."""
        ...
