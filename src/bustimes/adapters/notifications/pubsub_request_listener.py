"""Listener turning pub/sub messages from the display into notification calls."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from pyview.live_socket import pub_sub_hub
from pyview.vendor.flet.pubsub import PubSub

logger = logging.getLogger(__name__)

NotificationHandler = Callable[[str, dict[str, Any]], Awaitable[Any]]

SESSION_ID = "bustimes-request-listener"


class PubSubRequestListener:
    """Subscribes to the request topic and dispatches each message to a handler.

    Messages have the same shape as outgoing ones:
    ``{"notification": "GETDATA", "payload": {"identifier": ..., "config": {...}}}``.
    """

    def __init__(self, topic: str, handler: NotificationHandler) -> None:
        """Initialize with the request topic and the notification handler."""
        self.topic = topic
        self.handler = handler
        self._pubsub = PubSub(pub_sub_hub, SESSION_ID)

    async def start(self) -> None:
        """Subscribe to the request topic."""
        await self._pubsub.subscribe_topic_async(self.topic, self.on_message)
        logger.info(f"Listening for requests on topic: {self.topic}")

    async def stop(self) -> None:
        """Unsubscribe from the request topic."""
        await self._pubsub.unsubscribe_topic_async(self.topic)

    async def on_message(self, topic: str, message: Any) -> None:
        """Dispatch one pub/sub message to the handler."""
        if not isinstance(message, dict) or "notification" not in message:
            logger.warning(f"Ignoring malformed message on topic {topic}: {message!r}")
            return

        payload = message.get("payload")
        await self.handler(
            str(message["notification"]), payload if isinstance(payload, dict) else {}
        )
