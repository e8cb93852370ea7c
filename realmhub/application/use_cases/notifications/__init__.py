"""Public helpers for emitting domain notifications."""

from .producer import NotificationProducer, notify_from_thread

__all__ = ["NotificationProducer", "notify_from_thread"]
