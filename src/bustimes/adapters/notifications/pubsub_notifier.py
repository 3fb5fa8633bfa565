"""Notifier delivering departures results via PubSub."""

from __future__ import annotations

import logging
from typing import Any

from pyview.live_socket import pub_sub_hub
from pyview.vendor.flet.pubsub import PubSub

from bustimes.domain.ports.result_notifier import ResultNotifier

logger = logging.getLogger(__name__)


class PubSubNotifier(ResultNotifier):
    """Sends DATA and ERROR notifications to subscribers of a topic."""

    def __init__(self, topic: str) -> None:
        """Initialize with the pub/sub topic the display layer listens on."""
        self.topic = topic

    async def send_notification(self, notification: str, payload: dict[str, Any]) -> None:
        """Send a notification with its payload to all subscribers on the topic.

        Args:
            notification: Notification name, ``DATA`` or ``ERROR``.
            payload: Notification payload including the module identifier.
        """
        try:
            pubsub = PubSub(pub_sub_hub, self.topic)
            await pubsub.send_all_on_topic_async(
                self.topic, {"notification": notification, "payload": payload}
            )
            logger.info(
                f"Sent {notification} for module '{payload.get('identifier')}' "
                f"to topic: {self.topic}"
            )
        except Exception as e:
            logger.error(f"Failed to send {notification} via pubsub: {e}", exc_info=True)
