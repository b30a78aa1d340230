"""Notification center adapters."""

from crowdtrack.adapters.notifications.in_memory import InMemoryNotificationCenter

__all__ = ["InMemoryNotificationCenter"]
