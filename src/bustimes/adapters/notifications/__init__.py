"""Notification adapters."""

from bustimes.adapters.notifications.pubsub_notifier import PubSubNotifier
from bustimes.adapters.notifications.pubsub_request_listener import PubSubRequestListener

__all__ = ["PubSubNotifier", "PubSubRequestListener"]
